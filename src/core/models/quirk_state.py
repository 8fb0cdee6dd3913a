"""Machine-wide correction flags, computed once per scan."""
from dataclasses import dataclass


@dataclass(frozen=True)
class GlobalQuirkState:
    # fam15h_power loaded, or a CPU family that ships it
    alternate_power_module_active: bool = False
    # longest trimmed device label, used only for report alignment
    max_label_width: int = 0
