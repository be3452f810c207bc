import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

import yaml

if TYPE_CHECKING:  # pragma: no cover
    from .config import Settings

logger = logging.getLogger(__name__)

__all__ = [
    "load_db",
    "load_allow_db",
    "load_profanity_words",
    "load_override_words",
]


def _read_lines(p: Path) -> List[str]:
    try:
        if not p.exists():
            logger.warning("Wordlist: pack %s not found", p)
            return []
        lines = p.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Wordlist: failed to read pack %s (%s)", p, e)
        return []
    return [ln.strip() for ln in lines if ln.strip() and not ln.strip().startswith("#")]


def _dedupe(words: Iterable[str]) -> List[str]:
    out, seen = [], set()
    for w in words:
        lw = (w or "").strip().lower()
        if not lw or lw in seen:
            continue
        seen.add(lw)
        out.append(lw)
    return out


def _read_db(db_path: str) -> Dict[str, Any]:
    p = Path(db_path)
    if not p.exists():
        logger.info("Wordlist: %s not found", db_path)
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Wordlist: failed to load %s (%s)", db_path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Wordlist: %s is not a JSON object, ignoring", db_path)
        return {}
    return data


def _sections(data: Dict[str, Any], keys: Iterable[str], langs: Optional[Iterable[str]]) -> List[str]:
    words: List[str] = []
    wanted = set(langs) if langs else None
    for lang, section in data.items():
        if wanted is not None and lang not in wanted:
            continue
        if not isinstance(section, dict):
            continue
        for key in keys:
            words += [str(w) for w in (section.get(key) or [])]
    return words


def load_db(db_path: str, packs: Iterable[str] = (), langs: Optional[Iterable[str]] = None) -> List[str]:
    """Load the JSON mini database (stems + phrases) plus optional txt packs, merged."""
    words = _sections(_read_db(db_path), ("stems", "phrases"), langs)
    if words:
        logger.info("Wordlist: loaded %d words from %s", len(words), db_path)
    for raw in (packs or []):
        p = Path(raw.strip())
        add = _read_lines(p)
        if add:
            words += add
            logger.info("Wordlist: loaded %d words from pack %s", len(add), p)
    out = _dedupe(words)
    logger.info("Wordlist: merged total %d base entries", len(out))
    return out


def load_allow_db(db_path: str, langs: Optional[Iterable[str]] = None) -> List[str]:
    """Override entries (``allow`` sections) of the JSON mini database."""
    return _dedupe(_sections(_read_db(db_path), ("allow",), langs))


def _load_yaml(path: str) -> List[str]:
    p = Path(path)
    if not p.exists():
        return []
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Wordlist: failed to load %s (%s)", path, e)
        return []
    if isinstance(data, dict):
        data = data.get("words", [])
    if not isinstance(data, list):
        return []
    return [str(w).strip() for w in data if str(w).strip()]


def load_profanity_words(cfg: "Settings") -> List[str]:
    """Unified loader: mini DB + packs, then YAML, then the env list."""
    words = load_db(cfg.PROFANITY_DB_PATH, cfg.packs, cfg.langs)
    if words:
        return words
    words = _dedupe(_load_yaml(cfg.PROFANITY_YAML_PATH))
    if words:
        logger.info("Wordlist: loaded %d words from %s", len(words), cfg.PROFANITY_YAML_PATH)
        return words
    return _dedupe(cfg.extra_words)


def load_override_words(cfg: "Settings") -> List[str]:
    return _dedupe(load_allow_db(cfg.PROFANITY_DB_PATH, cfg.langs) + cfg.allow_words)
