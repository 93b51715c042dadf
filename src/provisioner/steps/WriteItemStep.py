from provisioner.steps.Step import Step
from provisioner.utilities.Utilities import logger, widget_item


class WriteItemStep(Step):

    def __init__(self, aws_utils=None, item=widget_item, **kwargs):
        super().__init__(aws_utils, **kwargs)
        self._item = item

    def execute(self):
        key = self._item['WidgetId']['S']
        logger.info(f"About to save item '{key}' to the {self._table_name} table...")
        # Unconditional put - overwrites an existing item with the same key
        self.aws_utils.put_item(self._table_name, self._item)
