"""Learning context: modules, tests, attempts, streaks and achievements."""
