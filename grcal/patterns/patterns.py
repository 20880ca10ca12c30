#grcal\patterns\patterns.py

import re

# ---------- Integer arguments ----------
# Optional single sign, then ASCII digits only
INT_TOKEN = re.compile(r"([+-]?)([0-9]+)")

# ---------- ISO dates ----------
# Calendar date part only; anything with a time component is rejected
ISO_DATE_TOKEN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
