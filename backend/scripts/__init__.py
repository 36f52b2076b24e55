"""
scripts

Package utilitaire pour les scripts de maintenance / dev.

Rôle (fonctionnel) :
- seed_movies.py : (re)insère les films de démonstration.
- issue_token.py : génère un JWT de test signé avec JWT_SECRET.

Note :
- Les scripts ne contiennent pas de logique métier : ils appellent les modules de `blackslope/`.
"""
