###############################################################################
#
# MIT License
#
# Copyright (c) 2025 The sysuname developers
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
###############################################################################
from typing import Any, Callable, Optional

from pydantic import ValidationError

from sysuname.enums import OSFamily
from sysuname.errors import UnameError
from sysuname.models import RECORD_TYPES, PlatformSample, UnameRecord
from sysuname.utils import convert, convert_bool, parse_ms_date, strip_or_none

# Win32_Processor Architecture codes
CPU_ARCHITECTURES = {
    0: "x86",
    1: "MIPS",
    2: "Alpha",
    3: "PowerPC",
    5: "ARM",
    6: "IA64",
    9: "x86_64",
    12: "ARM64",
}

UNKNOWN_ARCHITECTURE = "Unknown"

# record member -> (Win32_OperatingSystem property, converter)
WINDOWS_FIELD_MAP: dict[str, tuple[str, Callable[[Optional[str]], Any]]] = {
    "boot_device": ("BootDevice", strip_or_none),
    "build_number": ("BuildNumber", strip_or_none),
    "build_type": ("BuildType", strip_or_none),
    "caption": ("Caption", strip_or_none),
    "code_set": ("CodeSet", strip_or_none),
    "country_code": ("CountryCode", strip_or_none),
    "creation_class_name": ("CreationClassName", strip_or_none),
    "cscreation_class_name": ("CSCreationClassName", strip_or_none),
    "csd_version": ("CSDVersion", strip_or_none),
    "cs_name": ("CSName", strip_or_none),
    "current_time_zone": ("CurrentTimeZone", convert),
    "debug": ("Debug", convert_bool),
    "description": ("Description", strip_or_none),
    "distributed": ("Distributed", convert_bool),
    "encryption_level": ("EncryptionLevel", convert),
    "foreground_application_boost": ("ForegroundApplicationBoost", convert),
    "free_physical_memory": ("FreePhysicalMemory", convert),
    "free_space_in_paging_files": ("FreeSpaceInPagingFiles", convert),
    "free_virtual_memory": ("FreeVirtualMemory", convert),
    "install_date": ("InstallDate", parse_ms_date),
    "large_system_cache": ("LargeSystemCache", convert),
    "last_bootup_time": ("LastBootUpTime", parse_ms_date),
    "local_date_time": ("LocalDateTime", parse_ms_date),
    "locale": ("Locale", strip_or_none),
    "manufacturer": ("Manufacturer", strip_or_none),
    "max_number_of_processes": ("MaxNumberOfProcesses", convert),
    "max_process_memory_size": ("MaxProcessMemorySize", convert),
    "name": ("Name", strip_or_none),
    "number_of_licensed_users": ("NumberOfLicensedUsers", convert),
    "number_of_processes": ("NumberOfProcesses", convert),
    "number_of_users": ("NumberOfUsers", convert),
    "organization": ("Organization", strip_or_none),
    "os_language": ("OSLanguage", convert),
    "os_product_suite": ("OSProductSuite", convert),
    "os_type": ("OSType", convert),
    "other_type_description": ("OtherTypeDescription", strip_or_none),
    "plus_product_id": ("PlusProductID", strip_or_none),
    "plus_version_number": ("PlusVersionNumber", strip_or_none),
    "primary": ("Primary", convert_bool),
    "product_type": ("ProductType", convert),
    "quantum_length": ("QuantumLength", convert),
    "quantum_type": ("QuantumType", convert),
    "registered_user": ("RegisteredUser", strip_or_none),
    "serial_number": ("SerialNumber", strip_or_none),
    "service_pack_major_version": ("ServicePackMajorVersion", convert),
    "service_pack_minor_version": ("ServicePackMinorVersion", convert),
    "size_stored_in_paging_files": ("SizeStoredInPagingFiles", convert),
    "status": ("Status", strip_or_none),
    "suite_mask": ("SuiteMask", convert),
    "system_device": ("SystemDevice", strip_or_none),
    "system_directory": ("SystemDirectory", strip_or_none),
    "system_drive": ("SystemDrive", strip_or_none),
    "total_swap_space_size": ("TotalSwapSpaceSize", convert),
    "total_virtual_memory_size": ("TotalVirtualMemorySize", convert),
    "total_visible_memory_size": ("TotalVisibleMemorySize", convert),
    "version": ("Version", strip_or_none),
    "windows_directory": ("WindowsDirectory", strip_or_none),
}

# converters for family specific members which are not plain strings
POSIX_CONVERTERS: dict[str, Callable[[Optional[str]], Any]] = {
    "hw_serial": convert,
}


def cpu_architecture_name(code: Optional[str]) -> str:
    """Convert a Win32_Processor Architecture code into a name

    Args:
        code (Optional[str]): architecture code as text

    Returns:
        str: architecture name, "Unknown" for missing or unrecognized codes
    """
    value = convert(code)
    if value is None:
        return UNKNOWN_ARCHITECTURE
    return CPU_ARCHITECTURES.get(value, UNKNOWN_ARCHITECTURE)


def _windows_values(sample: PlatformSample) -> dict[str, Any]:
    values = {
        member: converter(sample.get(wmi_property))
        for member, (wmi_property, converter) in WINDOWS_FIELD_MAP.items()
    }
    values["sysname"] = values["caption"]
    values["nodename"] = values["cs_name"]
    values["release"] = values["version"]
    values["machine"] = cpu_architecture_name(sample.get("Architecture"))
    return values


def _posix_values(sample: PlatformSample, members: list[str]) -> dict[str, Any]:
    return {
        member: POSIX_CONVERTERS.get(member, strip_or_none)(sample.get(member))
        for member in members
    }


def build_record(sample: PlatformSample) -> UnameRecord:
    """Build the identity record for the OS family of a platform sample

    Args:
        sample (PlatformSample): raw platform data

    Raises:
        UnameError: if the sample data does not validate against the record type

    Returns:
        UnameRecord: record with the member set of the sample's OS family
    """
    record_type = RECORD_TYPES[sample.os_family]
    if sample.os_family == OSFamily.WINDOWS:
        values = _windows_values(sample)
    else:
        values = _posix_values(sample, record_type.members())

    try:
        return record_type(**values)
    except ValidationError as exception:
        raise UnameError(
            f"Incomplete {sample.os_family.name} identity data for {sample.host}: {str(exception)}"
        ) from exception
