"""
Components - Token resolvers and the theme composer.
"""
