from provisioner.steps.Step import Step
from provisioner.utilities.Utilities import logger, widget_key


class ReadItemStep(Step):

    def __init__(self, aws_utils=None, key=widget_key, **kwargs):
        super().__init__(aws_utils, **kwargs)
        self._key = key

    def execute(self):
        logger.info(f"About to fetch item '{self._key['WidgetId']['S']}' from the {self._table_name} table...")
        return self.aws_utils.get_item(self._table_name, self._key)
