"""SQLite database schema definitions."""

SCHEMA_SQL = """
-- Pantry materials
CREATE TABLE IF NOT EXISTS materials (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    category TEXT NOT NULL,
    is_available BOOLEAN DEFAULT TRUE,
    nutritional_info TEXT,          -- JSON list of strings
    description TEXT,
    image_url TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_materials_category ON materials(category);
CREATE INDEX IF NOT EXISTS idx_materials_available ON materials(is_available);

-- Generated meals; materials are stored by value so later catalog edits
-- do not change a meal that was already planned
CREATE TABLE IF NOT EXISTS meals (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    meal_type TEXT NOT NULL,
    preparation_time INTEGER DEFAULT 0,
    instructions TEXT,              -- JSON list of steps
    calories INTEGER,
    tags TEXT,                      -- JSON list of strings
    materials_json TEXT NOT NULL,   -- JSON list of material dicts
    image_url TEXT,
    created_at TIMESTAMP NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_meals_type ON meals(meal_type);

-- One plan per calendar date
CREATE TABLE IF NOT EXISTS meal_plans (
    id TEXT PRIMARY KEY,
    plan_date DATE NOT NULL UNIQUE,
    breakfast_meal_id TEXT,
    lunch_meal_id TEXT,
    dinner_meal_id TEXT,
    snack_meal_id TEXT,
    notes TEXT,
    is_completed BOOLEAN DEFAULT FALSE,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL,
    FOREIGN KEY (breakfast_meal_id) REFERENCES meals(id),
    FOREIGN KEY (lunch_meal_id) REFERENCES meals(id),
    FOREIGN KEY (dinner_meal_id) REFERENCES meals(id),
    FOREIGN KEY (snack_meal_id) REFERENCES meals(id)
);

CREATE INDEX IF NOT EXISTS idx_meal_plans_date ON meal_plans(plan_date);
"""


def get_schema_sql() -> str:
    """Return the complete schema SQL."""
    return SCHEMA_SQL
