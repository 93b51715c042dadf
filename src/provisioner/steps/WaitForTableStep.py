from provisioner.steps.Step import Step
from provisioner.utilities.Utilities import widgets_table_name


class WaitForTableStep(Step):

    def __init__(self, aws_utils=None, table_name=widgets_table_name, **wait_options):
        """
        :param wait_options: interval, max_attempts and/or sleep - anything left out uses the AwsUtilities defaults
        """
        super().__init__(aws_utils, table_name=table_name)
        self._wait_options = wait_options

    def execute(self):
        return self.aws_utils.wait_for_table(self._table_name, **self._wait_options)
