import os

from setuptools import setup, find_packages


from importlib.util import module_from_spec, spec_from_file_location


module_name = 'prefixtree'

try:
    spec = spec_from_file_location(
        module_name,
        os.path.join(module_name, 'version.py')
    )
    version = module_from_spec(spec)
    spec.loader.exec_module(version)

    version_info = version.version_info
except FileNotFoundError:
    version_info = (0, 0, 0)


__version__ = '{}.{}.{}'.format(*version_info)


def load_requirements(fname):
    """ load requirements from a pip requirements file """
    with open(fname) as f:
        line_iter = (line.strip() for line in f.readlines())
        return [line for line in line_iter if line and line[0] != '#']


setup(
    name=module_name,
    version=__version__,
    license='MIT',
    description='prefixtree - compressed prefix tree map and set',
    long_description=open("README.rst").read(),
    platforms="all",
    classifiers=[
        'Intended Audience :: Developers',
        'Operating System :: MacOS',
        'Operating System :: POSIX',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Libraries',
    ],
    packages=find_packages(exclude=['tests*']),
    package_data={
        "prefixtree": ["py.typed"],
        "prefixtree_log": ["py.typed"],
    },
    python_requires=">=3.7",
    install_requires=load_requirements('requirements.txt'),
    extras_require={
        'develop': load_requirements('requirements.dev.txt'),
    },
)
