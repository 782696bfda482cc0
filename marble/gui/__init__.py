"""GUI package — interface graphique pygame du Marble Solitaire.

Modules:
- selection: routeur de clics (sélection de la bille puis de l'arrivée)
- geometry: transformation case <-> écran et indexation des boutons
- hud_controller: texte d'état (score, fin de partie)
- renderer: rendu du plateau et des billes
- app: orchestrateur principal, consommé par play_gui.py
"""

__all__ = [
    "selection",
    "geometry",
    "hud_controller",
    "renderer",
    "app",
]
