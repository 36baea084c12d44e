from setuptools import find_packages, setup

package_name = 'bezier_velocity_field'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test', 'test.*']),
    package_data={
        package_name: ['config/*.yaml'],
    },
    python_requires='>=3.11',
    install_requires=[
        'setuptools',
        'numpy',
        'pyyaml',
    ],
    zip_safe=True,
    maintainer='hansoo',
    maintainer_email='hansoo@todo.todo',
    description='Cubic Bezier velocity fields and particle steering',
    license='MIT',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'curve_field = bezier_velocity_field.presentation.main:main',
        ],
    },
)
