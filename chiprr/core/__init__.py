"""
Couche domaine (core).

Contient les objets valeur, les ports (interfaces abstraites) et les exceptions metier.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (segments de chemin, resultat de matching)
- exceptions : Hierarchie des erreurs metier
"""
