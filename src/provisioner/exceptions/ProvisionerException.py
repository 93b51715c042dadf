class ProvisionerException(Exception):
    pass


class TableNotReadyException(ProvisionerException):

    def __init__(self, table_name, attempts, last_status=None):
        self.table_name = table_name
        self.attempts = attempts
        self.last_status = last_status
        super().__init__(f"Table '{table_name}' did not become ACTIVE after {attempts} attempts "
                         f"(last status: {last_status})")


class TableVanishedException(ProvisionerException):

    def __init__(self, table_name):
        self.table_name = table_name
        super().__init__(f"Table '{table_name}' already existed, but could not be found when describing it")


class TableNotActiveException(ProvisionerException):
    pass


class ItemNotFoundException(ProvisionerException):

    def __init__(self, table_name, key):
        self.table_name = table_name
        self.key = key
        super().__init__(f"Item {key} not found in table '{table_name}'")


class InvalidSettingException(ProvisionerException):

    def __init__(self, setting, value, reason):
        self.setting = setting
        self.value = value
        super().__init__(f"Invalid value for {setting}: {value!r} ({reason})")
