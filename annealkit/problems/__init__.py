"""Example problems that plug into the annealing engine."""

from annealkit.problems.tour import DEMO_XS, DEMO_YS, Tour, brute_force_cost, random_cities

__all__ = ["DEMO_XS", "DEMO_YS", "Tour", "brute_force_cost", "random_cities"]
