# eksnode

Building blocks for tooling that creates and manages EKS clusters. The
package works on plain Python data, strings and streams; it does not talk to
AWS or to a Kubernetes API server itself.

## Modules

| Module              | Purpose                                                                        |
|---------------------|--------------------------------------------------------------------------------|
| `eksnode.ipnet`     | `IPNet`, a CIDR value that serialises to and from JSON; `parse_cidr`           |
| `eksnode.vpc`       | Splitting a VPC CIDR into per-zone public and private subnets; finding dangling network interfaces |
| `eksnode.printers`  | `JSONPrinter`, `YAMLPrinter` and `TablePrinter`, chosen with `new_printer`     |
| `eksnode.manifests` | Loading multi-document YAML or JSON manifests into a flat list of resources   |
| `eksnode.waiters`   | Polling a status until an acceptor reports success or failure                 |
| `eksnode.utils`     | `is_gpu_instance_type`, `file_exists`, `expand_path`                           |
| `eksnode.version`   | Build version information: `get()` and `version_string()`                     |

## CIDRs

```python
from eksnode.ipnet import IPNet, parse_cidr

cidr = parse_cidr("192.168.0.10/16")
str(cidr)                 # '192.168.0.0/16'  (host bits are cleared)
cidr.to_json()            # '"192.168.0.0/16"'
IPNet().to_json()         # 'null'
IPNet.from_json('"10.0.0.5/8"')   # keeps the address as given: 10.0.0.5/8
```

`deep_copy()` returns an independent copy. Strings without a `/prefix` are
rejected with `ValueError`.

## Subnet planning

`set_subnets(cidr, zones)` requires a VPC prefix between /16 and /24. It
splits the CIDR into eight equal blocks with `split_into_8`, gives each zone
a public block from the start of the split and a private block following the
public ones, and returns a list of `ZoneSubnets(zone, public, private)`. More
than four zones raise `ValueError`.

```python
from eksnode.vpc import set_subnets

for s in set_subnets("192.168.0.0/16", ["us-west-2a", "us-west-2b", "us-west-2c"]):
    print(s.zone, s.public, s.private)
# us-west-2a 192.168.0.0/19 192.168.96.0/19
# us-west-2b 192.168.32.0/19 192.168.128.0/19
# us-west-2c 192.168.64.0/19 192.168.160.0/19
```

`find_dangling_interfaces(interfaces, cluster_name)` takes mappings shaped
like EC2 network-interface descriptions (`NetworkInterfaceId`, `Groups` with
`GroupName` and `GroupId`) and returns the IDs of those whose first security
group matches `security_group_name_pattern(cluster_name)`, i.e.
`^eksctl-<name>-(cluster|nodegroup)-.+$`.

## Printers

```python
import sys
from eksnode.printers import new_printer

new_printer("json").print_obj([{"name": "test-cluster"}], sys.stdout)  # 4-space indent
new_printer("yaml").print_obj([{"name": "test-cluster"}], sys.stdout)  # sorted keys

table = new_printer("table")
table.add_column("NAME", lambda c: c["name"])
table.add_column("ARN", lambda c: c["arn"])
table.print_obj_with_kind("clusters", [], sys.stdout)   # No clusters found
```

Dataclasses, enums, dates and objects with a `to_dict()` method are converted
before JSON or YAML output. The table printer accepts only lists and tuples
and raises `TypeError` for anything else; columns are aligned with tabs.
`log_obj(log, msg_fmt, obj)` renders the object and calls
`log(msg_fmt, rendered_text)`. An unknown printer type raises `ValueError`.

## Manifests

```python
from eksnode.manifests import new_list

items = new_list(open("addons.yaml", "rb").read())
```

`new_list` accepts bytes or text holding one or more YAML documents or
concatenated JSON documents. Any object whose `kind` ends in `List` is
flattened into its `items`, recursively. Every object needs `kind` and
`apiVersion`; otherwise `ManifestError` is raised.

## Waiters

```python
from eksnode.waiters import make_acceptors, wait

acceptors = make_acceptors("Cluster.Status", "ACTIVE", ["FAILED", "DELETING"])
wait("cluster", "waiting for cluster", acceptors, get_status, timeout=1200, troubleshoot=None)
```

`get_status` is called repeatedly, with a delay of 15 to 20 seconds between
calls, until the status matches the success acceptor. A failure status or an
exception from `get_status` raises `RuntimeError`; running out of time raises
`WaitTimeoutError`. `troubleshoot`, when given, is called with the desired
status before any error is raised.

## What the package does not do

It has no command-line program. It does not call AWS: subnets, interfaces
and statuses are passed in by the caller, and deleting interfaces is left to
the caller. It does not write or clean up kubeconfig files, check kubectl or
authenticator installations, generate node user data or kubelet settings,
look up pod limits per instance type, or generate cluster and node group
names.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.