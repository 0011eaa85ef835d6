# -*- coding: utf-8 -*-
from concertdraft.rules.postrules import parse_concert_announcement

__version__ = "0.1.0"

__all__ = ["parse_concert_announcement", "__version__"]
