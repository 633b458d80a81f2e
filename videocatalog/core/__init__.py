"""
Couche domaine (core).

Contient l'agregat Video, ses objets valeur, les ports (interfaces abstraites)
et la taxonomie d'erreurs. Cette couche n'a AUCUNE dependance vers
l'infrastructure (BDD, frameworks, logging).

Sous-packages :
- entities/ : Entites metier (Video, Media)
- value_objects/ : Objets valeur immutables (Image, Rating, MediaStatus)
- ports/ : Interfaces abstraites pour les adaptateurs
"""
