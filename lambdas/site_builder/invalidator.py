# lambdas/site_builder/invalidator.py
import time
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError


class DistributionNotFoundError(LookupError):
    """No CloudFront distribution serves the configured domain."""
    pass


def find_distribution_id(cloudfront, domain: str) -> str:
    """
    Looks up the distribution whose DomainName matches `domain`.
    The first match wins.

    Raises:
        DistributionNotFoundError: If no distribution matches.
    """
    paginator = cloudfront.get_paginator('list_distributions')
    for page in paginator.paginate():
        for distribution in page.get('DistributionList', {}).get('Items', []):
            if distribution.get('DomainName') == domain:
                return distribution['Id']
    raise DistributionNotFoundError(f"No CloudFront distribution found for domain '{domain}'")


def invalidate_cloudfront(cloudfront, domain: str) -> Optional[str]:
    """
    Requests an invalidation of every path on the site's distribution.
    Returns the invalidation ID, or None if the request could not be made.
    Does not wait for the invalidation to complete.
    """
    try:
        distribution_id = find_distribution_id(cloudfront, domain)
        response = cloudfront.create_invalidation(
            DistributionId=distribution_id,
            InvalidationBatch={
                # Must be unique per request or CloudFront treats it as a duplicate
                'CallerReference': f"site-builder-{int(time.time() * 1000)}",
                'Paths': {'Quantity': 1, 'Items': ['/*']},
            },
        )
    except DistributionNotFoundError as e:
        print(f"❌ {e}")
        return None
    except (ClientError, BotoCoreError) as e:
        print(f"❌ CloudFront invalidation failed for '{domain}': {e}")
        return None

    invalidation_id = response['Invalidation']['Id']
    print(f"✅ CloudFront invalidation {invalidation_id} created for distribution {distribution_id}.")
    return invalidation_id
