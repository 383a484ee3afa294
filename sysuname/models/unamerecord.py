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
import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict

from sysuname.enums import OSFamily


class UnameRecord(BaseModel):
    """Identity record holding the fields common to every OS family.

    Subclasses append the members reported by a single OS family. The member set of a
    record is fixed by its class. Every member must be supplied, individual values may
    be None.
    """

    model_config = ConfigDict(frozen=True)

    OS_FAMILY: ClassVar[OSFamily] = OSFamily.UNKNOWN

    sysname: Optional[str]
    nodename: Optional[str]
    machine: Optional[str]
    version: Optional[str]
    release: Optional[str]

    @classmethod
    def members(cls) -> list[str]:
        """Get the member names of this record type

        Returns:
            list[str]: member names in declaration order
        """
        return list(cls.model_fields.keys())


class LinuxUnameRecord(UnameRecord):
    OS_FAMILY: ClassVar[OSFamily] = OSFamily.LINUX

    domainname: Optional[str] = None


class DarwinUnameRecord(UnameRecord):
    OS_FAMILY: ClassVar[OSFamily] = OSFamily.DARWIN

    model: Optional[str] = None


class BsdUnameRecord(UnameRecord):
    OS_FAMILY: ClassVar[OSFamily] = OSFamily.BSD

    model: Optional[str] = None


class HpuxUnameRecord(UnameRecord):
    OS_FAMILY: ClassVar[OSFamily] = OSFamily.HPUX

    id: Optional[str] = None


class SolarisUnameRecord(UnameRecord):
    OS_FAMILY: ClassVar[OSFamily] = OSFamily.SOLARIS

    architecture: Optional[str] = None
    platform: Optional[str] = None
    hw_serial: Optional[int] = None
    hw_provider: Optional[str] = None
    srpc_domain: Optional[str] = None
    isa_list: Optional[str] = None
    dhcp_cache: Optional[str] = None


class WindowsUnameRecord(UnameRecord):
    """Identity record for Windows hosts, see the Win32_OperatingSystem WMI class
    documentation for the meaning of each member
    """

    OS_FAMILY: ClassVar[OSFamily] = OSFamily.WINDOWS

    boot_device: Optional[str] = None
    build_number: Optional[str] = None
    build_type: Optional[str] = None
    caption: Optional[str] = None
    code_set: Optional[str] = None
    country_code: Optional[str] = None
    creation_class_name: Optional[str] = None
    cscreation_class_name: Optional[str] = None
    csd_version: Optional[str] = None
    cs_name: Optional[str] = None
    current_time_zone: Optional[int] = None
    debug: Optional[bool] = None
    description: Optional[str] = None
    distributed: Optional[bool] = None
    encryption_level: Optional[int] = None
    foreground_application_boost: Optional[int] = None
    free_physical_memory: Optional[int] = None
    free_space_in_paging_files: Optional[int] = None
    free_virtual_memory: Optional[int] = None
    install_date: Optional[datetime.datetime] = None
    large_system_cache: Optional[int] = None
    last_bootup_time: Optional[datetime.datetime] = None
    local_date_time: Optional[datetime.datetime] = None
    locale: Optional[str] = None
    manufacturer: Optional[str] = None
    max_number_of_processes: Optional[int] = None
    max_process_memory_size: Optional[int] = None
    name: Optional[str] = None
    number_of_licensed_users: Optional[int] = None
    number_of_processes: Optional[int] = None
    number_of_users: Optional[int] = None
    organization: Optional[str] = None
    os_language: Optional[int] = None
    os_product_suite: Optional[int] = None
    os_type: Optional[int] = None
    other_type_description: Optional[str] = None
    plus_product_id: Optional[str] = None
    plus_version_number: Optional[str] = None
    primary: Optional[bool] = None
    product_type: Optional[int] = None
    quantum_length: Optional[int] = None
    quantum_type: Optional[int] = None
    registered_user: Optional[str] = None
    serial_number: Optional[str] = None
    service_pack_major_version: Optional[int] = None
    service_pack_minor_version: Optional[int] = None
    size_stored_in_paging_files: Optional[int] = None
    status: Optional[str] = None
    suite_mask: Optional[int] = None
    system_device: Optional[str] = None
    system_directory: Optional[str] = None
    system_drive: Optional[str] = None
    total_swap_space_size: Optional[int] = None
    total_virtual_memory_size: Optional[int] = None
    total_visible_memory_size: Optional[int] = None
    windows_directory: Optional[str] = None


RECORD_TYPES: dict[OSFamily, type[UnameRecord]] = {
    OSFamily.WINDOWS: WindowsUnameRecord,
    OSFamily.DARWIN: DarwinUnameRecord,
    OSFamily.LINUX: LinuxUnameRecord,
    OSFamily.SOLARIS: SolarisUnameRecord,
    OSFamily.BSD: BsdUnameRecord,
    OSFamily.HPUX: HpuxUnameRecord,
    OSFamily.UNKNOWN: UnameRecord,
}
