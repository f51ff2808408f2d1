"""setminify - combine and minify named sets of CSS and JavaScript files."""

__version__ = "0.1.0"
