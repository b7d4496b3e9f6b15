"""Jinja2 templates for files generated at configure time."""

LOCATOR_TEMPLATE = """\
# Package locator for {{ package_name }} {{ version }}.
# Generated by lmsbuild; changes are overwritten by the next configure run.

get_filename_component(PACKAGE_PREFIX_DIR "${CMAKE_CURRENT_LIST_DIR}/{{ prefix_relpath }}" ABSOLUTE)

set({{ package_name }}_VERSION "{{ version }}")
set({{ package_name }}_INCLUDE_DIR "${PACKAGE_PREFIX_DIR}/{{ include_destination }}")
set({{ package_name }}_LIBRARY_TARGETS {{ targets | join(" ") }})

if(EXISTS "${CMAKE_CURRENT_LIST_DIR}/{{ targets_file }}")
  include("${CMAKE_CURRENT_LIST_DIR}/{{ targets_file }}")
endif()

set({{ package_name }}_FOUND TRUE)

# No components are provided, so any required component fails the lookup
foreach(_comp {{ find_components }})
  if({{ package_name }}_FIND_REQUIRED_${_comp})
    set({{ package_name }}_FOUND FALSE)
    set({{ package_name }}_NOT_FOUND_MESSAGE "Unsupported component: ${_comp}")
  endif()
endforeach()
"""

VERSION_TEMPLATE = """\
# Package version file for {{ package_name }}.
# COMPATIBILITY {{ compatibility }}

set(PACKAGE_VERSION "{{ version }}")

if(PACKAGE_VERSION VERSION_LESS PACKAGE_FIND_VERSION)
  set(PACKAGE_VERSION_COMPATIBLE FALSE)
else()
{% if compatibility == "AnyNewerVersion" %}
  set(PACKAGE_VERSION_COMPATIBLE TRUE)
{% elif compatibility == "SameMajorVersion" %}
  if(PACKAGE_FIND_VERSION_MAJOR STREQUAL "{{ major }}")
    set(PACKAGE_VERSION_COMPATIBLE TRUE)
  else()
    set(PACKAGE_VERSION_COMPATIBLE FALSE)
  endif()
{% elif compatibility == "SameMinorVersion" %}
  if(PACKAGE_FIND_VERSION_MAJOR STREQUAL "{{ major }}" AND PACKAGE_FIND_VERSION_MINOR STREQUAL "{{ minor }}")
    set(PACKAGE_VERSION_COMPATIBLE TRUE)
  else()
    set(PACKAGE_VERSION_COMPATIBLE FALSE)
  endif()
{% else %}
  if(PACKAGE_FIND_VERSION VERSION_EQUAL PACKAGE_VERSION)
    set(PACKAGE_VERSION_COMPATIBLE TRUE)
  else()
    set(PACKAGE_VERSION_COMPATIBLE FALSE)
  endif()
{% endif %}
  if(PACKAGE_FIND_VERSION STREQUAL PACKAGE_VERSION)
    set(PACKAGE_VERSION_EXACT TRUE)
  endif()
endif()
"""

CMAKE_LISTS_TEMPLATE = """\
# Generated by lmsbuild for {{ project.name }} {{ project.version }}
{% for name, value in options %}
# {{ name }}={{ value }}
{% endfor %}
cmake_minimum_required(VERSION 3.16)
project({{ project.name }} VERSION {{ project.version }})

set(CMAKE_CXX_STANDARD {{ project.cxx_standard }})
set(CMAKE_CXX_STANDARD_REQUIRED {{ project.cxx_standard_required }})
{% if project.compile_options %}

add_compile_options({{ project.compile_options | join(" ") }})
{% endif %}
{% for directory in project.include_directories %}
include_directories(${CMAKE_SOURCE_DIR}/{{ directory }})
{% endfor %}
{% for message in diagnostics %}
message(STATUS "{{ message }}")
{% endfor %}
{% if test_package %}

enable_testing()
find_package({{ test_package }} REQUIRED)
{% if test_package == "GTest" %}
include(GoogleTest)
{% endif %}
{% endif %}
{% for target in targets %}

{% if target.kind == "interface" %}
add_library({{ target.name }} INTERFACE)
{% elif target.kind == "static_library" %}
add_library({{ target.name }} STATIC {{ target.sources | join(" ") }})
{% else %}
add_executable({{ target.name }} {{ target.sources | join(" ") }})
{% endif %}
{% for command, groups in target.properties %}
{% for visibility, values in groups %}
{{ command }}({{ target.name }} {{ visibility }} {{ values | join(" ") }})
{% endfor %}
{% endfor %}
{% if target.is_test %}
{% if test_package == "GTest" %}
gtest_discover_tests({{ target.name }})
{% else %}
add_test(NAME {{ target.name }} COMMAND {{ target.name }})
{% endif %}
{% endif %}
{% endfor %}
{% if generated_files %}

{% endif %}
{% for generated in generated_files %}
file(WRITE "${CMAKE_CURRENT_BINARY_DIR}/{{ generated.name }}" [==[
{{ generated.content }}]==])
{% endfor %}
{% if install_targets or install_directories or install_files %}

{% endif %}
{% for entry in install_targets %}
install(TARGETS {{ entry.target }}
{% if entry.export_set %}
    EXPORT {{ entry.export_set }}
{% endif %}
{% for kind, destination in entry.destinations %}
    {{ kind }} DESTINATION {{ destination }}
{% endfor %}
)
{% endfor %}
{% for rule in install_directories %}
install(DIRECTORY ${CMAKE_SOURCE_DIR}/{{ rule.directory }}/
    DESTINATION {{ rule.destination }}
    FILES_MATCHING PATTERN "{{ rule.pattern }}"
)
{% endfor %}
{% for rule in install_files %}
install(FILES
{% for name in rule.files %}
    "{{ rule.base }}/{{ name }}"
{% endfor %}
    DESTINATION {{ rule.destination }}
)
{% endfor %}
{% if export %}
install(EXPORT {{ export.name }}
    FILE {{ export.targets_file }}
    DESTINATION {{ export.destination }}
)
{% endif %}

set(CPACK_GENERATOR "{{ manifest.generator }}")
set(CPACK_PACKAGE_NAME "{{ manifest.name }}")
set(CPACK_PACKAGE_VERSION "{{ manifest.version }}")
set(CPACK_PACKAGE_CONTACT "{{ manifest.contact }}")
{% if manifest.description %}
set(CPACK_PACKAGE_DESCRIPTION_SUMMARY "{{ manifest.description }}")
{% endif %}
{% if manifest.vendor %}
set(CPACK_PACKAGE_VENDOR "{{ manifest.vendor }}")
{% endif %}
include(CPack)

add_custom_target(clean-all
{% for entry in clean_commands %}
    COMMAND ${CMAKE_COMMAND} -E {{ entry }}
{% endfor %}
    COMMENT "Cleaning all CMake-generated files and directories"
)
"""
