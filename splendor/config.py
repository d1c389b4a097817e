"""Chargement des options de règles depuis un fichier YAML.

Exemple de fichier::

    rules:
      enforce_token_limit: true
      enforce_reserve_limit: true
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import yaml

from splendor.engine.rules import RuleOptions

logger = logging.getLogger("splendor.config")


def load_rule_options(path: Union[str, Path]) -> RuleOptions:
    """Lit un fichier YAML et retourne les `RuleOptions` correspondantes.

    Le fichier peut contenir les options à la racine ou sous une clé `rules`.
    Un fichier vide donne les options par défaut.
    """

    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Rule options file {path} must contain a mapping")
    if "rules" in data:
        data = data["rules"] or {}
        if not isinstance(data, dict):
            raise ValueError(f"'rules' section of {path} must be a mapping")
    options = RuleOptions.from_mapping(data)
    logger.info(f"Loaded rule options from {path}: {options}")
    return options


__all__ = ["load_rule_options"]
