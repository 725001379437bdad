class Scoreboard:
    """Win/draw counters for the current session. Nothing is saved to disk."""

    RESULTS = ('X', 'O', 'Draw')

    def __init__(self):
        self.scores = {'X': 0, 'O': 0, 'Draw': 0}

    def record(self, result):
        if result not in self.RESULTS:
            raise ValueError(f"Unknown result: {result!r}")
        self.scores[result] += 1

    def reset(self):
        self.scores = {'X': 0, 'O': 0, 'Draw': 0}

    def labels(self):
        return [
            ("X Wins", self.scores['X']),
            ("O Wins", self.scores['O']),
            ("Draws", self.scores['Draw']),
        ]
