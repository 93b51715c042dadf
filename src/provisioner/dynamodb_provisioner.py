from provisioner.exceptions.ProvisionerException import ItemNotFoundException, TableNotActiveException
from provisioner.steps.EnsureTableStep import EnsureTableStep
from provisioner.steps.ReadItemStep import ReadItemStep
from provisioner.steps.WaitForTableStep import WaitForTableStep
from provisioner.steps.WriteItemStep import WriteItemStep
from provisioner.utilities.AwsUtilities import AwsUtilities
from provisioner.utilities.Utilities import logger, poll_interval, widget_key, widgets_table_name
from time import sleep as _sleep


class Provisioner:

    def __init__(self, dynamodb=None, interval=poll_interval, max_attempts=None, sleep=_sleep):
        self._aws_utils = AwsUtilities(dynamodb)
        self._interval = interval
        self._max_attempts = max_attempts
        self._sleep = sleep
        self._table_active = False

    def ensure_table(self):
        return EnsureTableStep(self._aws_utils).execute()

    def describe_table(self):
        return self._aws_utils.describe_table(widgets_table_name).description

    def wait_until_active(self):
        description = WaitForTableStep(self._aws_utils,
                                       interval=self._interval,
                                       max_attempts=self._max_attempts,
                                       sleep=self._sleep).execute()
        self._table_active = True
        return description

    def write_fixed_item(self):
        if not self._table_active:
            logger.error("Unable to write item")
            logger.error(f"Table '{widgets_table_name}' has not been seen as ACTIVE yet")
            raise TableNotActiveException(f"Wait for table '{widgets_table_name}' to become ACTIVE before writing")
        WriteItemStep(self._aws_utils).execute()

    def read_fixed_item(self):
        return ReadItemStep(self._aws_utils).execute()

    def run(self):
        self.ensure_table()
        self.wait_until_active()
        self.write_fixed_item()
        loaded_item = self.read_fixed_item()
        if 'Description' not in loaded_item:
            raise ItemNotFoundException(widgets_table_name, widget_key)
        description = loaded_item['Description']['S']
        logger.info(f"Item loaded. Description: {description}")
        return description


def main():
    return Provisioner().run()


if __name__ == '__main__':
    main()
