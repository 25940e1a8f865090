"""
Adaptateur de transport HTTP (FastAPI).

Traduit les requêtes HTTP en appels de services et les erreurs du domaine
en codes HTTP. Aucune logique métier ici.
"""
