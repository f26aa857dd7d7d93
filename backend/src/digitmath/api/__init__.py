"""
API package - HTTP surfaces over the arithmetic services.

Includes the HTML form handler and the JSON endpoints.
"""
