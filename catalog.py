import json
import logging
from typing import Dict, Optional
from pydantic import ValidationError
import config
from errors import CatalogError, InvalidDataShape, UnknownSoftware
from software import Software

logger = logging.getLogger(__name__)


def load_catalog(path: Optional[str] = None) -> Dict[str, Software]:
    """Read the JSON software catalog and return softwares keyed by identifier."""
    path = path or config.SOFTWARE_CATALOG_PATH
    logger.info('Loading software catalog: %s', path)
    with open(path, 'r', encoding='utf-8') as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise CatalogError(f'{path}: expected a JSON object of softwares')

    catalog: Dict[str, Software] = {}
    for name, description in raw.items():
        logger.debug('Parsing catalog entry: %s', name)
        try:
            catalog[name] = Software.from_description(description)
        except (KeyError, TypeError, InvalidDataShape, ValidationError) as e:
            raise CatalogError(f'{path}: invalid entry "{name}": {e}') from e
    logger.info('Catalog loaded: %d softwares', len(catalog))
    return catalog


def save_catalog(catalog: Dict[str, Software], path: str) -> None:
    logger.info('Saving %d softwares to %s', len(catalog), path)
    raw = {name: catalog[name].to_description() for name in sorted(catalog)}
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(raw, f, indent=2, ensure_ascii=False)
        f.write('\n')


def get_software(catalog: Dict[str, Software], name: str) -> Software:
    try:
        return catalog[name]
    except KeyError:
        raise UnknownSoftware(name) from None
