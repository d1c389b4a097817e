"""Moteur de règles Splendor et outils associés (service, simulation, RL)."""
