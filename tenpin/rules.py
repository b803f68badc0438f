class Ruleset:
    """Represents the rules of the game.

    Used by the scorer to know how many frames make up a game and how many
    pins stand at the start of each frame.
    """

    def __init__(self, num_frames=10, num_pins=10, ruleset_name="custom"):
        if num_frames < 1 or num_pins < 1:
            raise ValueError("A ruleset needs at least one frame and one pin")

        self.name = ruleset_name
        self.num_frames = num_frames
        self.num_pins = num_pins

    @property
    def max_open_score(self):
        # knocking down every pin in two rolls is a spare
        return self.num_pins - 1

    @property
    def max_spare_score(self):
        return 2 * self.num_pins

    @property
    def max_strike_score(self):
        return 3 * self.num_pins

    def __repr__(self):
        return f"{self.__class__.__name__}(ruleset_name={self.name})"


tenpin_rules = Ruleset(num_frames=10, num_pins=10, ruleset_name="tenpin")

AVAILABLE_RULESETS = {r.name: r for r in (tenpin_rules,)}
