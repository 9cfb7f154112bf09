"""
Vehicle orders placed from the configurator.
"""
