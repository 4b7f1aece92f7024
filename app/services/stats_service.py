from collections import OrderedDict
from typing import Dict, List, Set

from app.repositories.contracts import WorkoutRepositoryContract
from app.schemas.stats import ExerciseProgressPoint, MuscleGroupStat, PersonalBest


class StatsService:
    """Read-only aggregates over the caller's logged sets."""

    def __init__(self, workouts: WorkoutRepositoryContract):
        self.workouts = workouts

    async def muscle_group_stats(self, user_id: int) -> List[MuscleGroupStat]:
        history = await self.workouts.list_set_history(user_id)

        dates: Dict[str, Set] = {}
        set_counts: Dict[str, int] = {}
        for row in history:
            dates.setdefault(row.muscle_group, set()).add(row.date)
            set_counts[row.muscle_group] = set_counts.get(row.muscle_group, 0) + 1

        return [
            MuscleGroupStat(
                muscle_group=group,
                workout_count=len(dates[group]),
                set_count=set_counts[group],
            )
            for group in sorted(set_counts)
        ]

    async def personal_bests(self, user_id: int) -> List[PersonalBest]:
        history = await self.workouts.list_set_history(user_id)

        bests: Dict[int, PersonalBest] = {}
        for row in history:
            if row.weight <= 0:
                continue
            current = bests.get(row.exercise_id)
            if current is None or row.weight > current.max_weight:
                bests[row.exercise_id] = PersonalBest(
                    exercise_id=row.exercise_id,
                    exercise_name=row.exercise_name,
                    muscle_group=row.muscle_group,
                    max_weight=row.weight,
                )

        return sorted(bests.values(), key=lambda b: (b.muscle_group, b.exercise_name, b.exercise_id))

    async def exercise_progress(self, user_id: int, exercise_id: int) -> List[ExerciseProgressPoint]:
        """One point per training date, oldest first."""
        history = await self.workouts.list_set_history(user_id, exercise_id=exercise_id)

        points: "OrderedDict" = OrderedDict()
        for row in sorted(history, key=lambda r: r.date):
            max_weight, volume = points.get(row.date, (0.0, 0.0))
            points[row.date] = (max(max_weight, row.weight), volume + row.weight * row.reps)

        return [
            ExerciseProgressPoint(date=day, max_weight=max_weight, total_volume=volume)
            for day, (max_weight, volume) in points.items()
        ]
