"""
Gameplay configuration for the invaders simulation
Tuning constants for the play field, enemy roster, power-ups and persistence
"""

# Play field and entity sizes
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "player_width": 50,
    "player_height": 40,
    "player_speed": 5.0,     # units per reference tick
    "player_margin": 10,     # gap between player and bottom edge
    "enemy_width": 38,
    "enemy_height": 30,
    "bullet_width": 2,
    "bullet_height": 10,
    "bullet_speed": 7.0,
    "enemy_bullet_speed": 4.0,
    "reference_tick_ms": 16.0,  # 60 FPS reference frame
    "starting_lives": 3,
    "max_lives": 5,
    "row_drop": 10,          # linear enemies drop this far on each wall bounce
}

# ==============================================================================
# DIFFICULTY
# Multiplies enemy base speed, power-up spawn rate and awarded points
# ==============================================================================

DIFFICULTY_CONFIG = {
    "easy": 1.0,
    "medium": 1.5,
    "hard": 2.0,
}

# ==============================================================================
# ENEMY TYPES
# ==============================================================================

ENEMY_TYPE_CONFIG = {
    "basic":    {"points": 10,  "health": 1, "speed_mult": 1.0, "can_shoot": False, "pattern": "linear",   "unlock_level": 1},
    "fast":     {"points": 15,  "health": 1, "speed_mult": 1.5, "can_shoot": False, "pattern": "linear",   "unlock_level": 2},
    "tough":    {"points": 20,  "health": 3, "speed_mult": 0.7, "can_shoot": True,  "pattern": "linear",   "unlock_level": 3},
    "zigzag":   {"points": 10,  "health": 1, "speed_mult": 1.0, "can_shoot": False, "pattern": "zigzag",   "unlock_level": 4},
    "circular": {"points": 10,  "health": 2, "speed_mult": 0.8, "can_shoot": True,  "pattern": "circular", "unlock_level": 6},
    "diving":   {"points": 10,  "health": 1, "speed_mult": 1.2, "can_shoot": True,  "pattern": "diving",   "unlock_level": 8},
    "boss":     {"points": 100, "health": 0, "speed_mult": 1.0, "can_shoot": True,  "pattern": "linear",   "unlock_level": 0},
}

# Closed-form movement pattern parameters
MOVEMENT_CONFIG = {
    "zigzag_amplitude": 50.0,
    "zigzag_frequency": 2.0,
    "circle_radius": 50.0,
    "circle_drift": 5.0,          # downward drift per second per unit of speed
    "dive_line": 0.6,             # fraction of field height where a dive levels out
    "dive_sweep_amplitude": 100.0,
    "dive_sweep_frequency": 3.0,
}

# ==============================================================================
# SPAWNING
# ==============================================================================

SPAWN_CONFIG = {
    "boss_level_every": 10,
    "boss_escort_count": 5,
    "base_enemy_count": 6,
    "enemies_per_level": 2,
    "max_enemy_count": 40,
    "grid_columns": 10,
    "grid_gap": 20,
    "grid_left": 50,
    "grid_top": 50,
    "base_speed": 1.0,
    "speed_per_level": 0.2,
    "boss_base_health": 20,
    "boss_health_per_level": 5,
    "boss_speed_per_level": 0.1,
    "boss_size_cap": 4.0,         # boss size never exceeds 4x a regular enemy
    "enemy_shoot_cooldown": (90, 180),   # frames between shots
    "boss_shoot_cooldown": (45, 75),
    "boss_volley_size": 3,
    "barrier_count": 4,
    "barrier_width": 60,
    "barrier_height": 20,
    "barrier_health": 5,
    "barrier_offset": 80,         # distance above the player row
}

# ==============================================================================
# POWER-UPS
# ==============================================================================

POWERUP_CONFIG = {
    "spawn_rate": 0.001,       # per reference tick, before difficulty multiplier
    "size": 20,
    "fall_speed": 2.0,
    "duration_ms": 10000.0,
    "spread_offset": 10,       # lateral spacing of the rapid-fire spread
}

# ==============================================================================
# PERSISTENCE
# ==============================================================================

HIGHSCORE_CONFIG = {
    "path": "./highscores.json",
    "max_entries": 10,
    "default_name": "PLAYER",
}

# ==============================================================================
# HEADLESS AGENT ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "difficulty": "medium",
    "frame_ms": 1000 / 60,
    "max_steps": 3600,         # 60 seconds at 60 FPS
    "k_enemies": 5,
    "m_bullets": 3,
    "shoot_cooldown_steps": 8,
    "life_penalty": 5.0,
}
