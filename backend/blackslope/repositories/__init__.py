"""
blackslope.repositories

Accès aux données (SQLAlchemy async). Un repository par agrégat ; ici : movies.
Les repositories manipulent des entités ORM et ne connaissent pas HTTP.
"""
