"""
Adaptateurs vers les collaborateurs externes.

- events.py : Publication des événements de domaine (loguru, mémoire)
"""
