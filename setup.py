from setuptools import find_packages, setup

package_name = 'tms_load_adapter'

setup(
    name=package_name,
    version='0.0.0',
    packages=find_packages(exclude=['test']),
    package_data={
        package_name: ['config/*.yaml'],
    },
    python_requires='>=3.11',
    install_requires=[
        'setuptools',
        'pyyaml',
    ],
    zip_safe=True,
    maintainer='hansoo',
    maintainer_email='hansoo@todo.todo',
    description='TMS Load adapter: shipment normalization and ID resolution',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
