import boto3
import logging
import os
from provisioner.exceptions.ProvisionerException import InvalidSettingException


_ch = logging.StreamHandler()
_formatter = logging.Formatter('%(asctime)s %(levelname)8s %(name)s | %(message)s')
logger = logging.getLogger('dynamodb_provisioner_library')
_ch.setFormatter(_formatter)
logger.addHandler(_ch)
logger.setLevel(logging.DEBUG)

default_region = 'us-west-2'
poll_interval = 0.5
default_max_poll_attempts = 120

widgets_table_name = 'Widgets'
widgets_table_properties = {'AttributeDefinitions': [{'AttributeName': 'WidgetId', 'AttributeType': 'S'}],
                            'TableName': widgets_table_name,
                            'KeySchema': [{'AttributeName': 'WidgetId', 'KeyType': 'HASH'}],
                            'ProvisionedThroughput': {'ReadCapacityUnits': 1, 'WriteCapacityUnits': 1}}

widget_key = {'WidgetId': {'S': '123'}}
widget_item = {'WidgetId': {'S': '123'},
               'Description': {'S': 'This is a widget.'}}


def validate_max_attempts(max_attempts, setting='max_attempts'):
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
        logger.error(f"Unable to poll with {setting}={max_attempts!r}")
        raise InvalidSettingException(setting, max_attempts, "must be a whole number of at least 1")
    return max_attempts


def get_max_poll_attempts():
    """
    Number of status checks before giving up on a table.
    Can be overridden through the PROVISIONER_MAX_ATTEMPTS environment variable.
    """
    value = os.environ.get('PROVISIONER_MAX_ATTEMPTS')
    if value is None:
        return default_max_poll_attempts
    try:
        max_attempts = int(value)
    except ValueError:
        logger.error(f"Unable to read PROVISIONER_MAX_ATTEMPTS={value!r}")
        raise InvalidSettingException('PROVISIONER_MAX_ATTEMPTS', value, "must be a whole number of at least 1") from None
    return validate_max_attempts(max_attempts, setting='PROVISIONER_MAX_ATTEMPTS')


def get_dynamodb_client(region_name=None, endpoint_url=None,
                        aws_access_key_id=None, aws_secret_access_key=None):
    """
    Builds the DynamoDB client used by the provisioner.
    Falls back to the environment (AWS_DEFAULT_REGION, DYNAMODB_ENDPOINT_URL) and boto3's credential chain.
    An explicit key pair has to be complete.
    """
    logger.info("Creating DynamoDB client...")
    kwargs = {'region_name': region_name or os.environ.get('AWS_DEFAULT_REGION', default_region)}
    endpoint_url = endpoint_url or os.environ.get('DYNAMODB_ENDPOINT_URL')
    if endpoint_url:
        kwargs['endpoint_url'] = endpoint_url
    if bool(aws_access_key_id) != bool(aws_secret_access_key):
        missing = 'aws_secret_access_key' if aws_access_key_id else 'aws_access_key_id'
        logger.error("Unable to create DynamoDB client")
        logger.error("Pass both the access key and the secret key, or neither")
        raise InvalidSettingException(missing, None, "required when the other half of the key pair is given")
    if aws_access_key_id:
        kwargs['aws_access_key_id'] = aws_access_key_id
        kwargs['aws_secret_access_key'] = aws_secret_access_key
    return boto3.client('dynamodb', **kwargs)
