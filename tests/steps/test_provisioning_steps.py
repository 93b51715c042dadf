import pytest
from provisioner.dynamodb_provisioner import Provisioner
from provisioner.exceptions.ProvisionerException import (ItemNotFoundException, TableNotActiveException,
                                                          TableNotReadyException, TableVanishedException)
from provisioner.steps.EnsureTableStep import EnsureTableStep
from provisioner.steps.ReadItemStep import ReadItemStep
from provisioner.steps.WaitForTableStep import WaitForTableStep
from provisioner.steps.WriteItemStep import WriteItemStep
from provisioner.utilities.AwsUtilities import AwsUtilities
from provisioner.utilities.Utilities import widget_item, widget_key, widgets_table_name, widgets_table_properties


describe_params = {'TableName': widgets_table_name}
put_params = {'TableName': widgets_table_name, 'Item': widget_item}
get_params = {'TableName': widgets_table_name, 'Key': widget_key}


def table(status):
    return {'TableName': widgets_table_name, 'TableStatus': status}


def test_ensure_table_step__returns_description_of_new_table(dynamodb_stub):
    dynamodb, stubber = dynamodb_stub
    stubber.add_response('create_table', {'TableDescription': table('CREATING')}, widgets_table_properties)
    #
    assert EnsureTableStep(AwsUtilities(dynamodb)).execute() == table('CREATING')


def test_ensure_table_step__describes_existing_table(dynamodb_stub):
    dynamodb, stubber = dynamodb_stub
    stubber.add_client_error('create_table', service_error_code='ResourceInUseException')
    stubber.add_response('describe_table', {'Table': table('UPDATING')}, describe_params)
    #
    assert EnsureTableStep(AwsUtilities(dynamodb)).execute() == table('UPDATING')


def test_ensure_table_step__fails_when_existing_table_disappears(dynamodb_stub):
    dynamodb, stubber = dynamodb_stub
    stubber.add_client_error('create_table', service_error_code='ResourceInUseException')
    stubber.add_client_error('describe_table', service_error_code='ResourceNotFoundException')
    #
    with pytest.raises(TableVanishedException) as e:
        EnsureTableStep(AwsUtilities(dynamodb)).execute()
    assert e.value.table_name == widgets_table_name


def test_item_steps__write_and_read_the_widget(dynamodb_stub):
    dynamodb, stubber = dynamodb_stub
    stubber.add_response('put_item', {}, put_params)
    stubber.add_response('get_item', {'Item': widget_item}, get_params)
    #
    aws_utils = AwsUtilities(dynamodb)
    WriteItemStep(aws_utils).execute()
    assert ReadItemStep(aws_utils).execute()['Description'] == {'S': 'This is a widget.'}


def test_run__new_table_becomes_active_after_a_few_polls(dynamodb_stub, sleeps):
    dynamodb, stubber = dynamodb_stub
    stubber.add_response('create_table', {'TableDescription': table('CREATING')}, widgets_table_properties)
    for status in ['CREATING', 'CREATING', 'ACTIVE']:
        stubber.add_response('describe_table', {'Table': table(status)}, describe_params)
    stubber.add_response('put_item', {}, put_params)
    stubber.add_response('get_item', {'Item': widget_item}, get_params)
    #
    assert Provisioner(dynamodb=dynamodb, sleep=sleeps.append).run() == 'This is a widget.'
    assert sleeps == [0.5, 0.5]


def test_run__existing_active_table_needs_a_single_poll(dynamodb_stub, sleeps):
    dynamodb, stubber = dynamodb_stub
    stubber.add_client_error('create_table', service_error_code='ResourceInUseException')
    stubber.add_response('describe_table', {'Table': table('ACTIVE')}, describe_params)
    stubber.add_response('describe_table', {'Table': table('ACTIVE')}, describe_params)
    stubber.add_response('put_item', {}, put_params)
    stubber.add_response('get_item', {'Item': widget_item}, get_params)
    #
    assert Provisioner(dynamodb=dynamodb, sleep=sleeps.append).run() == 'This is a widget.'
    assert sleeps == []


def test_run__never_writes_when_table_does_not_become_active(dynamodb_stub, sleeps):
    dynamodb, stubber = dynamodb_stub
    stubber.add_response('create_table', {'TableDescription': table('CREATING')}, widgets_table_properties)
    for _ in range(3):
        stubber.add_response('describe_table', {'Table': table('CREATING')}, describe_params)
    #
    provisioner = Provisioner(dynamodb=dynamodb, max_attempts=3, sleep=sleeps.append)
    with pytest.raises(TableNotReadyException):
        provisioner.run()
    with pytest.raises(TableNotActiveException):
        provisioner.write_fixed_item()
    # No put_item response was queued - the Stubber would have failed on any write


def test_run__fails_when_item_is_not_visible(dynamodb_stub, sleeps):
    dynamodb, stubber = dynamodb_stub
    stubber.add_response('create_table', {'TableDescription': table('ACTIVE')}, widgets_table_properties)
    stubber.add_response('describe_table', {'Table': table('ACTIVE')}, describe_params)
    stubber.add_response('put_item', {}, put_params)
    stubber.add_response('get_item', {}, get_params)
    #
    with pytest.raises(ItemNotFoundException) as e:
        Provisioner(dynamodb=dynamodb, sleep=sleeps.append).run()
    assert e.value.key == widget_key


def test_wait_for_table_step__falls_back_to_default_interval(dynamodb_stub, sleeps):
    dynamodb, stubber = dynamodb_stub
    stubber.add_response('describe_table', {'Table': table('CREATING')}, describe_params)
    stubber.add_response('describe_table', {'Table': table('ACTIVE')}, describe_params)
    #
    description = WaitForTableStep(AwsUtilities(dynamodb), sleep=sleeps.append).execute()
    assert description == table('ACTIVE')
    assert sleeps == [0.5]
