from typing import List, Tuple

from random_nft.common.types.types import Address

BASIC_NFT_NAME = "Dogie"
BASIC_NFT_SYMBOL = "DOG"
BASIC_NFT_TOKEN_URI = (
    "ipfs://bafybeig37ioir76s7mg5oobetncojcm3c3hxasyd4rvid4jqhy4gkaheg4/?filename=0-PUG.json"
)
BASIC_NFT_ADDRESS: Address = 0xE7F1725E7734CE288F8367E1BB143E90BB3F0512

RANDOM_IPFS_NFT_NAME = "Random IPFS NFT"
RANDOM_IPFS_NFT_SYMBOL = "RIN"
RANDOM_IPFS_NFT_ADDRESS: Address = 0x9FE46736679D2D9A65F0992F2272DE9F3C7FA6E0
DEFAULT_MINT_FEE = "0.01"

# (breed, weight) - weights add up to the max chance value of 100.
DOG_BREED_WEIGHTS: List[Tuple[str, int]] = [
    ("PUG", 10),
    ("SHIBA_INU", 30),
    ("ST_BERNARD", 60),
]

DOG_TOKEN_URIS: List[str] = [
    "ipfs://QmaVkBn2tKmjbhphU7eyztbvSQU5EXDdqRyXZtRhSGgJGo",
    "ipfs://QmYQC5aGZu2PTH8XzbJrbDnvhj3gVs7ya33H9mqUNvST3d",
    "ipfs://QmZYmH5iDbD6v3U2ixoVAjioSzvWJszDzYdbeCLquGSpVm",
]
