"""Maintenance scripts for the movie catalog database."""
