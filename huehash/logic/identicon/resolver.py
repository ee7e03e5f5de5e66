#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/logic/identicon/resolver.py

import argparse

from huehash.core.errors import HuehashError
from huehash.shared.logger import fail
from .engine import IdenticonSession
from .renderer import render_identicon
from .seed import encode_payload


def resolve_identicon_input(args: argparse.Namespace) -> None:
    """Build the identicon session from CLI arguments and render it."""
    if args.raw:
        data = args.text.encode("utf-8")
    else:
        data = encode_payload(args.text)

    colors = {
        "foreground": args.foreground,
        "background": args.background,
        "spot": args.spot,
    }

    try:
        session = IdenticonSession(data, size=args.size, scale=args.scale, colors=colors)
        pixels = session.render()
    except HuehashError as exc:
        fail(str(exc))

    render_identicon(session, pixels, show_cells=args.cells, show_palette=args.palette)
