"""Application package for crustier.

Holds the entry points that own a real drawing surface. Import
:mod:`crustier.app.show` explicitly; it pulls in pygame.
"""
