"""Version of tvscanner, also sent in the User-Agent header."""

VERSION = "1.0.0"
