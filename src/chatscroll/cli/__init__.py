"""Command-line front end for chatscroll."""
