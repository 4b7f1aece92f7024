"""
Preset exercise catalog shared by every user.
"""

INITIAL_EXERCISES = [
    # chest
    {"name": "Bench Press", "muscle_group": "chest"},
    {"name": "Incline Bench Press", "muscle_group": "chest"},
    {"name": "Dumbbell Press", "muscle_group": "chest"},
    {"name": "Dumbbell Fly", "muscle_group": "chest"},
    {"name": "Chest Press Machine", "muscle_group": "chest"},
    {"name": "Cable Crossover", "muscle_group": "chest"},
    {"name": "Dips", "muscle_group": "chest"},
    {"name": "Push-up", "muscle_group": "chest"},
    # back
    {"name": "Deadlift", "muscle_group": "back"},
    {"name": "Pull-up", "muscle_group": "back"},
    {"name": "Lat Pulldown", "muscle_group": "back"},
    {"name": "Barbell Row", "muscle_group": "back"},
    {"name": "Dumbbell Row", "muscle_group": "back"},
    {"name": "Seated Cable Row", "muscle_group": "back"},
    # shoulders
    {"name": "Overhead Press", "muscle_group": "shoulders"},
    {"name": "Dumbbell Shoulder Press", "muscle_group": "shoulders"},
    {"name": "Lateral Raise", "muscle_group": "shoulders"},
    {"name": "Front Raise", "muscle_group": "shoulders"},
    {"name": "Rear Delt Fly", "muscle_group": "shoulders"},
    {"name": "Upright Row", "muscle_group": "shoulders"},
    # arms
    {"name": "Barbell Curl", "muscle_group": "arms"},
    {"name": "Dumbbell Curl", "muscle_group": "arms"},
    {"name": "Hammer Curl", "muscle_group": "arms"},
    {"name": "Triceps Pushdown", "muscle_group": "arms"},
    {"name": "Skull Crusher", "muscle_group": "arms"},
    {"name": "Close-Grip Bench Press", "muscle_group": "arms"},
    # legs
    {"name": "Squat", "muscle_group": "legs"},
    {"name": "Leg Press", "muscle_group": "legs"},
    {"name": "Leg Extension", "muscle_group": "legs"},
    {"name": "Leg Curl", "muscle_group": "legs"},
    {"name": "Lunge", "muscle_group": "legs"},
    {"name": "Romanian Deadlift", "muscle_group": "legs"},
    {"name": "Calf Raise", "muscle_group": "legs"},
    # abs
    {"name": "Crunch", "muscle_group": "abs"},
    {"name": "Plank", "muscle_group": "abs"},
    {"name": "Hanging Leg Raise", "muscle_group": "abs"},
    {"name": "Ab Roller", "muscle_group": "abs"},
    # other
    {"name": "Running", "muscle_group": "other"},
    {"name": "Stationary Bike", "muscle_group": "other"},
]
