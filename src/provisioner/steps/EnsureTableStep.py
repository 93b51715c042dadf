from provisioner.exceptions.ProvisionerException import TableVanishedException
from provisioner.steps.Step import Step
from provisioner.utilities.Outcomes import AlreadyExists
from provisioner.utilities.Utilities import logger, widgets_table_properties


class EnsureTableStep(Step):

    def __init__(self, aws_utils=None, properties=widgets_table_properties):
        super().__init__(aws_utils, table_name=properties['TableName'])
        self._properties = properties

    def execute(self):
        created = self.aws_utils.create_table(self._properties)
        if not isinstance(created, AlreadyExists):
            return created.description
        # Table already created, just describe it
        logger.info("Table already exists. Fetching description...")
        existing = self.aws_utils.describe_table(self._table_name)
        if existing.description is None:
            logger.error(f"Table '{self._table_name}' was reported as existing, but has disappeared since")
            raise TableVanishedException(self._table_name)
        return existing.description
