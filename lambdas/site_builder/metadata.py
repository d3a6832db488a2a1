# lambdas/site_builder/metadata.py
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import yaml
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from .models import METADATA_FILENAME, SOURCE_PREFIX, AlbumMetadata


def metadata_key(album: str) -> str:
    return f"{SOURCE_PREFIX}{album}/{METADATA_FILENAME}"


def parse_metadata(raw: bytes) -> Optional[AlbumMetadata]:
    """
    Parses a metadata.yml body. Anything that is not a YAML mapping
    with a usable shape yields None.
    """
    try:
        doc = yaml.safe_load(raw.decode('utf-8'))
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        print(f"⚠️ Could not parse album metadata: {e}")
        return None

    if not isinstance(doc, dict):
        return None

    try:
        return AlbumMetadata.model_validate(doc)
    except ValidationError as e:
        print(f"⚠️ Album metadata has an unexpected shape: {e}")
        return None


def fetch_album_metadata(s3, bucket: str, album: str) -> Optional[AlbumMetadata]:
    """
    Downloads and parses an album's metadata.yml.
    Most albums don't have one, so a missing object is not an error.
    """
    key = metadata_key(album)
    try:
        response = s3.get_object(Bucket=bucket, Key=key)
        raw = response['Body'].read()
    except ClientError as e:
        code = e.response.get('Error', {}).get('Code')
        if code not in ('NoSuchKey', '404'):
            print(f"⚠️ Could not fetch metadata s3://{bucket}/{key}: {e}")
        return None
    except BotoCoreError as e:
        print(f"⚠️ Could not fetch metadata s3://{bucket}/{key}: {e}")
        return None

    return parse_metadata(raw)


def fetch_all_metadata(s3, bucket: str, albums: List[str], max_workers: int) -> List[Optional[AlbumMetadata]]:
    """
    Fetches metadata for every album concurrently.
    The result is index-aligned with `albums`.
    """
    if not albums:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        metadata = list(ex.map(lambda album: fetch_album_metadata(s3, bucket, album), albums))

    found = sum(1 for m in metadata if m is not None)
    print(f"Loaded metadata for {found} of {len(albums)} albums.")
    return metadata
