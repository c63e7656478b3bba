"""
HTTP adapter for the portal: routes, request schemas and error mapping.
"""
