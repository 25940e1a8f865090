"""
Topics - Domaine multi-tenant (utilisateurs, films, fichiers, messages).

Ce package modélise des entités auditables (dates de création et de
suppression) avec suppression logique, persistées via des repositories
interchangeables et orchestrées par des services applicatifs.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, métadonnées, erreurs)
- services/ : Couche application (cas d'utilisation, orchestration)
- infrastructure/ : Stockage (mémoire, SQLModel)
- adapters/ : Publication d'événements
- web/ : Adaptateur de transport HTTP (FastAPI)
"""

__version__ = "0.1.0"
