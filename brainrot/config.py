"""Game constants and env-driven settings."""
from __future__ import annotations

import os
from dataclasses import dataclass

# Permanent slots per user; the pending slot does not count.
CAPACITY = 10

FARM_COOLDOWN = 60 * 60
STEAL_COOLDOWN = 60 * 60
REPLACE_TIMEOUT = 10 * 60
STEAL_SUCCESS_CHANCE = 0.5

# Draw weight per rarity tier; anything not listed ("secret" tiers) weighs 1.
RARITY_WEIGHTS = {
    "common": 15,
    "rare": 10,
    "epic": 7,
    "legendary": 4,
    "mythic": 2,
}
DEFAULT_RARITY_WEIGHT = 1


def rarity_weight(rarity: str | None) -> int:
    return RARITY_WEIGHTS.get((rarity or "").strip().lower(), DEFAULT_RARITY_WEIGHT)


@dataclass(frozen=True)
class GameRules:
    capacity: int = CAPACITY
    farm_cooldown: int = FARM_COOLDOWN
    steal_cooldown: int = STEAL_COOLDOWN
    replace_timeout: int = REPLACE_TIMEOUT
    steal_success_chance: float = STEAL_SUCCESS_CHANCE


def settings_from_env(base_dir: str) -> dict:
    """Flask config keys read from the environment."""
    db_path = os.path.join(base_dir, "brainrot.db")
    return {
        "SECRET_KEY": os.environ.get("SECRET_KEY", "dev"),
        "SQLALCHEMY_DATABASE_URI": os.environ.get("DATABASE_URL", f"sqlite:///{db_path}"),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "AUTO_CREATE_TABLES": os.environ.get("AUTO_CREATE_TABLES", "1") == "1",
        "CORS_ORIGINS": os.environ.get("CORS_ORIGINS", "*"),
        "BRAINROT_CAPACITY": int(os.environ.get("BRAINROT_CAPACITY", CAPACITY)),
        "BRAINROT_FARM_COOLDOWN": int(os.environ.get("BRAINROT_FARM_COOLDOWN", FARM_COOLDOWN)),
        "BRAINROT_STEAL_COOLDOWN": int(os.environ.get("BRAINROT_STEAL_COOLDOWN", STEAL_COOLDOWN)),
        "BRAINROT_REPLACE_TIMEOUT": int(os.environ.get("BRAINROT_REPLACE_TIMEOUT", REPLACE_TIMEOUT)),
        "BRAINROT_STEAL_SUCCESS": float(os.environ.get("BRAINROT_STEAL_SUCCESS", STEAL_SUCCESS_CHANCE)),
    }


def rules_from_config(config) -> GameRules:
    return GameRules(
        capacity=int(config.get("BRAINROT_CAPACITY", CAPACITY)),
        farm_cooldown=int(config.get("BRAINROT_FARM_COOLDOWN", FARM_COOLDOWN)),
        steal_cooldown=int(config.get("BRAINROT_STEAL_COOLDOWN", STEAL_COOLDOWN)),
        replace_timeout=int(config.get("BRAINROT_REPLACE_TIMEOUT", REPLACE_TIMEOUT)),
        steal_success_chance=float(config.get("BRAINROT_STEAL_SUCCESS", STEAL_SUCCESS_CHANCE)),
    )
