"""Worked solutions to the exercise set, grouped by topic."""