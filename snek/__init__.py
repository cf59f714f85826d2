# Snek Source Package
"""
Snek - Grid-based snake game core.

Modules:
- core: Abstract interface that the game implements for outer layers
- game: Snake, directions, keys, and the game state machine
- utils: Configuration and logging setup
"""
