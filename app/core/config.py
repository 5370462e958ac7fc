APP_TITLE = "Learner Grades"

# Late policy
LATE_PENALTY_FRACTION = 0.10  # 10% of points_possible off a late submission
