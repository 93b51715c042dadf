from provisioner.exceptions.ProvisionerException import TableNotReadyException
from provisioner.utilities.Outcomes import AlreadyExists, Created, Found, NotFound
from provisioner.utilities.Utilities import (logger, get_dynamodb_client, get_max_poll_attempts, poll_interval,
                                             validate_max_attempts)
from tenacity import RetryError, Retrying, retry_if_result, stop_after_attempt, wait_fixed
from time import sleep as _sleep


def _not_active(outcome):
    return not outcome.is_active()


def _log_status(retry_state):
    outcome = retry_state.outcome.result()
    status = outcome.status().value if outcome.status() else ''
    logger.info(f"Table not ready yet. Status: {status}. "
                f"Sleeping {int(retry_state.next_action.sleep * 1000)} ms.")


class AwsUtilities:

    def __init__(self, dynamodb=None):
        self._dynamodb = dynamodb if dynamodb else get_dynamodb_client()

    def create_table(self, properties):
        """
        Creates a table in DynamoDB, without waiting for it to become ACTIVE
        :param properties: DynamoDB table properties as specified by the AWS SDK
        :return: Created(description) or AlreadyExists() if a table with the same name is present
        """
        logger.info(f"Sending request to build {properties['TableName']} table...")
        try:
            created_table = self._dynamodb.create_table(**properties)['TableDescription']
        except self._dynamodb.exceptions.ResourceInUseException:
            logger.debug(f"Table '{properties['TableName']}' already exists")
            return AlreadyExists()
        logger.info("Table created.")
        return Created(created_table)

    def describe_table(self, table_name):
        try:
            return Found(self._dynamodb.describe_table(TableName=table_name)['Table'])
        except self._dynamodb.exceptions.ResourceNotFoundException:
            logger.debug(f"Table '{table_name}' does not exist")
            return NotFound()

    def wait_for_table(self, table_name, interval=poll_interval, max_attempts=None, sleep=_sleep):
        """
        Polls the table until its status is ACTIVE.
        Any error other than a missing table is raised straight away.
        :param table_name: Name of the table to poll
        :param interval: Seconds to wait between two attempts
        :param max_attempts: Number of describe-calls before giving up, defaults to get_max_poll_attempts()
        :param sleep: Function used to wait between attempts
        :return: The description of the ACTIVE table
        """
        if max_attempts is None:
            max_attempts = get_max_poll_attempts()
        else:
            validate_max_attempts(max_attempts)
        retrying = Retrying(wait=wait_fixed(interval),
                            stop=stop_after_attempt(max_attempts),
                            retry=retry_if_result(_not_active),
                            before_sleep=_log_status,
                            sleep=sleep)
        try:
            outcome = retrying(self.describe_table, table_name)
        except RetryError as e:
            last_status = e.last_attempt.result().status()
            logger.error(f"Table '{table_name}' is still not ACTIVE - giving up after {max_attempts} attempts")
            raise TableNotReadyException(table_name, max_attempts,
                                         last_status.value if last_status else None) from e
        logger.info(f"Table status: {outcome.status().value}")
        return outcome.description

    def put_item(self, table_name, item):
        self._dynamodb.put_item(TableName=table_name, Item=item)

    def get_item(self, table_name, key):
        return self._dynamodb.get_item(TableName=table_name, Key=key).get('Item', {})
