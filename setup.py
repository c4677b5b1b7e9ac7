from setuptools import setup

setup(
    name='numstring',
    version='1.0',
    description='Digit-string conversion between radices 2 to 36 over an unsigned 64-bit magnitude.',
    python_requires='>=3.10',
    py_modules=['config', 'errors', 'alphabet', 'core_logic', 'schemas', 'numstring'],
    install_requires=[
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
