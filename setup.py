import setuptools
import codecs
import os
import re

here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    # intentionally *not* adding an encoding option to open, See:
    #   https://github.com/pypa/virtualenv/issues/201#issuecomment-3145690
    with codecs.open(os.path.join(here, *parts), 'r') as fp:
        return fp.read()


def get_version():
    version_file = read('src', 'provisioner', '__init__.py')
    version_match = re.search(r'^__version__ = [\'"]([^\'"]*)[\'"]',
                              version_file, re.MULTILINE)
    if version_match:
        return version_match.group(1)
    raise RuntimeError('Unable to find version string.')


setuptools.setup(
    name="dynamodb-provisioner",
    version=get_version(),
    description="Demo client that provisions a DynamoDB table and round-trips an item through it",
    long_description=read('README.md'),
    long_description_content_type="text/markdown",
    packages = setuptools.find_namespace_packages(where='src'),
    package_dir = {'': 'src'},
    install_requires=[
        'boto3',
        'tenacity'
    ],
    extras_require={
        'test': ['pytest', 'moto>=5']
    },
    entry_points={
        'console_scripts': ['widget-demo=provisioner.dynamodb_provisioner:main']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities"
    ],
    python_requires='>=3.8',
)
