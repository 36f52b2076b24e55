"""
blackslope.db

Package base de données : connexion, session et données de seed.

Contenu :
- base : classe Base SQLAlchemy (metadata commune).
- session : engine async + sessions pour FastAPI (Depends(get_db)).
- seed : les 50 films “placeholder” insérés par la migration initiale et le script de seed.
- migrations : configuration Alembic (côté sync) via DATABASE_URL_SYNC.
"""
