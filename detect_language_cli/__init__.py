"""Command line front end for detect_language."""
