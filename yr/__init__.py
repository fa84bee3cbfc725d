"""Release and bilingual documentation tooling for yimi-rutool."""

__version__ = "0.1.0"
