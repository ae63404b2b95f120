"""
Server side rendering of full pages and htmx fragments.
"""
