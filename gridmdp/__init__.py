"""Grid-world MDP: value iteration, transition matrices, robustness checks, simulation and charts."""

__version__ = "0.1.0"
__all__ = ["config", "mdp", "transitions", "robustness", "simulation", "plots", "cli"]