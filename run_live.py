# photo-site-builder/run_live.py
import json
import boto3
from botocore.exceptions import ClientError
from dotenv import load_dotenv

# Load SITE_BUCKET, ORIGINAL_BUCKET, etc. from a local .env file
load_dotenv()

# Import the main handler function and settings
from lambdas.site_builder.app import handler
from lambdas.site_builder.models import get_settings


def check_buckets():
    """Checks that both configured buckets exist and are reachable with the current credentials."""
    settings = get_settings()
    s3 = boto3.client('s3')

    for bucket in (settings.original_bucket, settings.site_bucket):
        try:
            s3.head_bucket(Bucket=bucket)
            print(f"S3 bucket '{bucket}' is reachable.")
        except ClientError as e:
            if e.response['Error']['Code'] in ('404', 'NoSuchBucket'):
                print(f"S3 bucket '{bucket}' does not exist.")
            raise e


def run_live():
    """Executes the site_builder Lambda handler using your live AWS credentials."""
    print("--- Starting LIVE Run of site_builder Lambda ---")

    try:
        check_buckets()
    except Exception as e:
        print(f"Could not complete setup. Aborting run. Error: {e}")
        return

    try:
        print("\n--- Invoking Lambda handler (this will write to S3 and invalidate CloudFront) ---")
        result = handler({}, {})
        print("--- Lambda handler execution finished ---")

        print("\n--- Final JSON Output from Lambda: ---")
        if result['statusCode'] != 200:
            print(result['body'])
            return
        final_output = json.loads(result['body'])
        print(json.dumps(final_output, indent=2))

        print(f"\n Done! The site has been published to the '{get_settings().site_bucket}' bucket.")
    except Exception as e:
        print(f"\n An unexpected error occurred during the run: {e}")


if __name__ == "__main__":
    run_live()
