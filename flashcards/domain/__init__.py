"""
Domain layer.

Pure business objects with no knowledge of persistence or transport.
"""
