from dataclasses import dataclass

@dataclass
class CalcConfig:
    """Runtime options for the calculator driver"""
    trace: bool = False
    log_level: str = "WARNING"
    prompt: str = "expr: "

    def effective_level(self) -> str:
        # The token trace is logged at DEBUG
        return "DEBUG" if self.trace else self.log_level
