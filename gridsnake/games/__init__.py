"""
Games module for gridsnake.
"""
