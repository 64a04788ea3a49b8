"""
Self-play matches between agents.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from schemas.game_config import GameConfig
from territory.board import Player
from territory.game import BlokusGame, Outcome

from .random_agent import RandomAgent

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """
    Result of one self-play match.

    Attributes:
        outcome: Outcome computed from remaining piece counts
        moves_made: Number of pieces placed
        blocked_player: Player left without a legal move, if the match stopped early
        duration: Wall-clock seconds
    """
    outcome: Outcome
    moves_made: int
    blocked_player: Optional[Player] = None
    duration: float = 0.0
    history: List[str] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        """True when every piece was placed."""
        return self.blocked_player is None


def play_match(config: Optional[GameConfig] = None,
               agents: Optional[Dict[Player, RandomAgent]] = None) -> MatchResult:
    """
    Play one game between agents.

    There is no passing: when the player to move has no legal move the match
    stops and the outcome is decided on the pieces left at that point.

    Args:
        config: Game configuration (defaults to GameConfig())
        agents: Agent per player; missing players get a RandomAgent seeded
            from ``config.seed`` plus the player number

    Returns:
        MatchResult
    """
    start_time = time.time()
    game = BlokusGame(config)
    seed = game.config.seed
    agents = dict(agents or {})
    for player in game.players:
        if player not in agents:
            agents[player] = RandomAgent(None if seed is None else seed + player.value)

    blocked_player = None
    while not game.is_game_over():
        player = game.get_current_player()
        move = agents[player].choose_move(game.board, player, game.get_available_pieces())
        if move is None:
            blocked_player = player
            logger.info(f"{player.name} has no legal move after {game.move_count} moves; stopping")
            break
        piece_index = game.get_available_pieces().index(move.piece)
        verdict = game.make_move(piece_index, move.position)
        if not verdict.is_legal:
            raise RuntimeError(f"Agent produced an illegal move {move}: {verdict.reason.value}")

    return MatchResult(
        outcome=game.get_outcome(),
        moves_made=game.move_count,
        blocked_player=blocked_player,
        duration=time.time() - start_time,
        history=[str(move) for move in game.history],
    )
