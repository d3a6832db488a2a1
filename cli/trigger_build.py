import os
import json
import argparse
import boto3
from botocore.exceptions import ClientError
from dotenv import load_dotenv

# Load environment variables from a .env file for local testing
load_dotenv()

# Name of the deployed function (see the SiteBuilderFunctionName stack output)
FUNCTION_NAME = os.environ.get("SITE_BUILDER_FUNCTION")


def trigger_build(function_name: str, wait: bool = True) -> dict | None:
    """
    Invokes the deployed site builder.
    With wait=True the build summary is returned; otherwise the build is
    queued and None is returned.
    """
    if not function_name:
        print("❌ ERROR: SITE_BUILDER_FUNCTION environment variable not set. Please create a .env file.")
        return None

    lambda_client = boto3.client('lambda')
    print(f"--- Triggering site build: {function_name} ---")

    try:
        response = lambda_client.invoke(
            FunctionName=function_name,
            InvocationType='RequestResponse' if wait else 'Event',
            Payload=json.dumps({"source": "cli"}).encode('utf-8'),
        )
    except ClientError as e:
        print(f"❌ Failed to invoke {function_name}: {e.response['Error']['Message']}")
        return None

    if not wait:
        print(f"✅ Build queued. Status Code: {response['StatusCode']}")
        return None

    result = json.loads(response['Payload'].read())
    if response.get('FunctionError'):
        print(f"❌ The build raised an error: {result}")
        return None

    summary = json.loads(result['body']) if result.get('statusCode') == 200 else None
    if summary is None:
        print(f"❌ The build did not run: {result.get('body')}")
        return None

    print("✅ Build finished.")
    print(json.dumps(summary, indent=2))
    return summary


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Rebuilds the photo gallery homepage by invoking the deployed site builder Lambda."
    )
    parser.add_argument(
        '--function',
        default=FUNCTION_NAME,
        help='Name or ARN of the site builder function (defaults to $SITE_BUILDER_FUNCTION).'
    )
    parser.add_argument(
        '--no-wait',
        action='store_true',
        help='Queue the build and return immediately instead of waiting for the summary.'
    )

    args = parser.parse_args()
    trigger_build(args.function, wait=not args.no_wait)
