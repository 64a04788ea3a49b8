"""
Agents that choose moves for a player.
"""
