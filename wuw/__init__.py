"""wuw: report which packages each Go directory declares and imports."""

__version__ = "0.1.0"
