"""
Fonctions utilitaires partagees dans le projet chiprr.

Ce module centralise les fonctions reutilisees a travers le codebase :
- normalize_accents : suppression des diacritiques pour comparaison
- strip_invisible_chars : retrait des caracteres de controle venant des APIs
"""

import unicodedata


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    return "".join(
        char for char in text if unicodedata.category(char) not in ("Cf", "Cc")
    )


def normalize_accents(text: str) -> str:
    """
    Supprime les accents d'une chaine pour une comparaison insensible aux accents.

    Utilise la decomposition NFD puis filtre les caracteres diacritiques (Mn).
    Ex: "Casa dé Papel" -> "Casa de Papel"
    """
    normalized = unicodedata.normalize("NFD", text)
    return "".join(char for char in normalized if unicodedata.category(char) != "Mn")
