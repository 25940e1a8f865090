"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites), les
capacités de métadonnées partagées et la taxonomie d'erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (User, Movie, File, Message) et configuration validée
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- metadata.py : Capacités Auditable et MultiTenant
- errors.py : ValidationError, NotFoundError, RepositoryError
- events.py : Événements de domaine publiés par les services
"""
