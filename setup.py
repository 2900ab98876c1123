import os
from setuptools import setup

package_names = ['route_tracker', 'controller', 'simulation']

setup(
    name='sailing_pilot',
    version='1.0.0',
    packages=package_names,
    package_dir={name: os.path.join('src', name, name) for name in package_names},
    data_files=[
        (os.path.join('share', 'sailing_pilot', 'resource'), ['resource/mission.yaml']),
    ],
    python_requires='>=3.10',
    install_requires=[
        'setuptools',
        'numpy',
        'shapely',
        'pydantic>=2',
        'pyyaml',
    ],
    zip_safe=True,
    maintainer='Marcus Kornmann',
    maintainer_email='marcus.kornmann@sailingteam.tu-darmstadt.de',
    description='Waypoint tracking and tacking pilot for an autonomous sailboat',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
        'plot': [
            'matplotlib',
        ],
    },
    entry_points={
        'console_scripts': [
            'sailing_simulation = simulation.runner:main',
        ],
    },
)
