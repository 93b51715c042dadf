import boto3
import pytest
from botocore.stub import Stubber
from settings import REGION


@pytest.fixture()
def dynamodb_stub():
    # Scripted responses, for status sequences that a mock can't reproduce (CREATING -> ACTIVE)
    dynamodb = boto3.client('dynamodb', region_name=REGION,
                            aws_access_key_id='testing', aws_secret_access_key='testing')
    with Stubber(dynamodb) as stubber:
        yield dynamodb, stubber
        stubber.assert_no_pending_responses()


@pytest.fixture()
def sleeps():
    return []
