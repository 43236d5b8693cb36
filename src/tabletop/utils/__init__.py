"""
Utils module - game registry, configuration and factory.
"""
