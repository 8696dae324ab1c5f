"""Timber-style arcade game pieces: bees, clouds, the player and the heads-up display."""