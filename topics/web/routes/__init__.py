"""
Routes de l'API HTTP, une par agrégat.
"""
