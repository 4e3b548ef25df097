from __future__ import annotations

import hashlib


def compute_text_digest(text: str, alg: str = "sha256") -> str:
    h = hashlib.new(alg)
    h.update(text.encode("utf-8", errors="surrogatepass"))
    return h.hexdigest()
