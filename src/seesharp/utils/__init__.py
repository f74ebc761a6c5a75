"""Text and path helpers used to name tests and assemblies."""
