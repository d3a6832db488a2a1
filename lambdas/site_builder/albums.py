# lambdas/site_builder/albums.py
from typing import List

from .models import SOURCE_PREFIX, AlbumListing, RemoteObject


def list_source_objects(s3, bucket: str) -> List[RemoteObject]:
    """
    Lists every object in the original media bucket.

    Raises:
        ClientError: If the listing call fails. The caller treats this as fatal.
    """
    paginator = s3.get_paginator('list_objects_v2')
    objects = []
    for page in paginator.paginate(Bucket=bucket):
        for obj in page.get('Contents', []):
            objects.append(RemoteObject(key=obj['Key'], last_modified=obj['LastModified']))
    print(f"Found {len(objects)} objects in s3://{bucket}")
    return objects


def strip_prefix(key: str, prefix: str = SOURCE_PREFIX) -> str:
    return key.replace(prefix, '', 1)


def folder_name(stripped_key: str) -> str:
    return stripped_key.split('/')[0]


def derive_albums(objects: List[RemoteObject]) -> AlbumListing:
    """
    Groups the bucket listing into albums by top-level folder.

    Albums are ordered by their newest object. Each album's picture list
    holds its .jpg keys (prefix stripped), newest first. Other files still
    make the folder an album but never show up as pictures.
    """
    # sorted() is stable, so objects with the same timestamp keep listing order
    newest_first = sorted(objects, key=lambda o: o.last_modified, reverse=True)
    keys = [strip_prefix(o.key) for o in newest_first]

    albums = list(dict.fromkeys(folder_name(k) for k in keys))

    pictures = [
        [k for k in keys if k.startswith(album + '/') and k.endswith('.jpg')]
        for album in albums
    ]
    return AlbumListing(albums=albums, pictures=pictures)
