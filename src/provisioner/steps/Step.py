from provisioner.utilities.AwsUtilities import AwsUtilities
from provisioner.utilities.Utilities import widgets_table_name


class Step:

    def __init__(self, aws_utils=None, table_name=widgets_table_name):
        self.aws_utils = aws_utils if aws_utils else AwsUtilities()
        self._table_name = table_name

    def execute(self):
        pass
