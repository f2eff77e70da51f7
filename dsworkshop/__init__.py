"""Console workshops on stacks, a two-queue simulation, search structures and graph cuts."""

__version__ = "0.1.0"