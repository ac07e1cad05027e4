from setuptools import setup, find_packages

setup(
    name='weather_station',
    version='1.0.0',
    description='Weather station: observer pattern example pushing measurements to displays',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(include=['weather_station', 'weather_station.*']),
    install_requires=[         # Add dependencies from requirements.txt
        line.strip() for line in open('requirements.txt').readlines() if line.strip()
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    license='BSD-3-Clause'
)
