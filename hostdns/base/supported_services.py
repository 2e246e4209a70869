from typing import Literal


existing_services = Literal[
    "dns",
    "metadata",
]
