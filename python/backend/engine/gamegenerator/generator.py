"""Builds shuffled memory-game decks."""

from __future__ import annotations

import logging
import math
import random
from typing import Sequence

from backend.engine.gamegenerator.shuffle import shuffle
from backend.models.card import Card
from backend.models.config import GameConfig
from backend.models.faces import DEFAULT_FACE_POOL

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates decks of face groups, then shuffles them."""

    @staticmethod
    def faces(
        total_cards: int,
        group_size: int,
        face_pool: Sequence[str],
        rng: random.Random | None = None,
    ) -> list[str]:
        """Return the shuffled face identifiers for a deck.

        Faces are taken from *face_pool* in order, wrapping around when the
        pool is smaller than the number of groups needed, so the same face
        may back several groups on large grids.  When *total_cards* is not a
        multiple of *group_size* the last group is cut short by the final
        truncation, which happens after shuffling.
        """
        if total_cards < 1:
            raise ValueError(f"A deck needs at least one card, got {total_cards}.")
        if group_size < 2:
            raise ValueError(f"Group size must be at least 2, got {group_size}.")
        if not face_pool:
            raise ValueError("Face pool is empty.")

        pool_size = len(face_pool)
        unique_needed = math.ceil(total_cards / group_size)
        chosen = [face_pool[i % pool_size] for i in range(unique_needed)]

        faces: list[str] = []
        for face in chosen:
            faces.extend([face] * group_size)

        while len(faces) < total_cards:
            faces.append(face_pool[len(faces) % pool_size])

        shuffle(faces, rng)
        return faces[:total_cards]

    @staticmethod
    def build(
        total_cards: int,
        group_size: int,
        face_pool: Sequence[str],
        rng: random.Random | None = None,
    ) -> list[Card]:
        """Return a shuffled deck of exactly *total_cards* hidden cards."""
        faces = GameGenerator.faces(total_cards, group_size, face_pool, rng)
        logger.debug(
            "Built deck: %d cards, group size %d, %d distinct faces",
            total_cards, group_size, len(set(faces)),
        )
        return [Card(face_id=face) for face in faces]

    @staticmethod
    def generate(
        config: GameConfig,
        face_pool: Sequence[str] = DEFAULT_FACE_POOL,
        rng: random.Random | None = None,
    ) -> list[Card]:
        """Return a fresh deck for *config*."""
        return GameGenerator.build(config.total_cards, config.group_size, face_pool, rng)
