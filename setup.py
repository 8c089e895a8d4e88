"""
setup.py for Audioscope pip package.


Creating an Audioscope Development Environment
----------------------------------------------

From the directory containing this file:

    python -m venv .venv
    source .venv/bin/activate
    pip install -e .[test]


Running Audioscope Unit Tests
-----------------------------

From the directory containing this file:

    python -m unittest discover -s audioscope -t .

To run the unit tests for just one module:

    python -m unittest audioscope.util.tests.test_fft


Building the Audioscope Package
-------------------------------

    pip install build
    python -m build

The build process will write package `.tar.gz` and `.whl` files to the
`dist` subdirectory of the directory containing this file.
"""


from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from setuptools import find_packages, setup


def load_version_module(package_name):
    module_name = f'{package_name}.version'
    file_path = Path(__file__).parent / package_name / 'version.py'
    module_spec = spec_from_file_location(module_name, file_path)
    module = module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


version = load_version_module('audioscope')


setup(
      
    name='audioscope',
    version=version.__version__,
    description=(
        'Waveform, spectrum, and spectrogram analysis of audio for '
        'display.'),
    license='MIT',
    
    packages=find_packages(include=['audioscope', 'audioscope.*']),
    
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    
    python_requires='>=3.8',
    
    install_requires=[
        'numpy',
        'ruamel.yaml',
    ],
    
    extras_require={
        'test': ['scipy'],
    },
      
    entry_points={
        'console_scripts': [
            'audioscope_analyze=audioscope.scripts.analyze_audio_file:_main',
        ]
    },
      
    include_package_data=True,
    zip_safe=False
    
)
