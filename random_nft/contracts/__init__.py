from random_nft.contracts.basic_nft import BasicNFT
from random_nft.contracts.random_ipfs_nft import RandomIpfsNFT

__all__ = ["BasicNFT", "RandomIpfsNFT"]
