import json
import logging

from errors import FileError, SerializationError


def save_json(path, data):
    """
    Write `data` to `path` as JSON indented by 2 spaces, replacing any
    existing file. Encoding happens before the file is opened, so an
    unserializable value leaves the target untouched.
    """
    try:
        payload = json.dumps(data, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot serialize data for {path}: {exc}") from exc
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(payload)
    except OSError as exc:
        raise FileError(f"cannot write {path}: {exc}") from exc
    logging.info("Wrote %s", path)
