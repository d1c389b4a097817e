"""Simulation headless et politiques de base."""

from .policies import AgentPolicy, GreedyPolicy, RandomLegalPolicy
from .runner import GameSummary, HeadlessEnv, StepResult, play_game

__all__ = [
    "AgentPolicy",
    "GreedyPolicy",
    "RandomLegalPolicy",
    "HeadlessEnv",
    "StepResult",
    "GameSummary",
    "play_game",
]
