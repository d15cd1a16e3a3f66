"""
Precomputed Poseidon constant tables.

ROUND_CONSTS holds round keys for width 6 and up to 150 rounds, consumed
one per state element per round. MDS_ENTRIES is the 6 x 6 mixing matrix,
row-major. Every entry is 64 big-endian hex digits encoding one element of
the BN254 scalar field.

Entry i of ROUND_CONSTS is SHA-256("zkposeidon/round_key/<i>") and entry
(i, j) of MDS_ENTRIES is SHA-256("zkposeidon/mds/<i>/<j>"), each with the
top four bits cleared so the value is below the field modulus. The tables
are loaded as-is; nothing in this package regenerates them.
"""

ROUND_CONSTS = (
    "0b6a6714e220e3df0e1c6889ff486bb05d889bfff3a0210c2953e84cc72fb19e",
    "0a0bbbd56a43bd222ad738a21792b06468ca5cb7af62172d3a0cfc243dd2073a",
    "0073c4040472288bae1a6e4bc531df643b9e34fed4e48d720b111bcbfb13d0ee",
    "04e8b799b57ae8e303da866470624a989f13a793aca165e8ee498cd575b1a82c",
    "0caa3dbb4464c766d1dd0b3eab1064f8cb2c137f1eceaf51e6f5c8900039772f",
    "0f5f40e38e12cd25d0c37ceefefdf8986e9c46213beeeb725de9da27abefb09d",
    "0ee41f4e891754d70f908e9806aaa562ec1512a2729e074421aa5e740c74474e",
    "09be7203ec4567fe46c965a468a2ad74a384447eaab72925a4b6884a4bc8d89b",
    "0504b74365bac3b786178fb0ccffdef2243d9545ea40587a04f23f985c548686",
    "05dbe86b97091110dabc81bdeffa4524a13f5b39e164d2b793c9247453db86ba",
    "0bc4148c3f79567249213deae224d836b3dbea598f8b1d20157c92391dbff2e4",
    "01967eb9bdfb73b74be77bbb59055bd2c1de7a612ccef78a3ad91694baa36eeb",
    "0453d860d01f5c03f4d8b4e13883f62c7ad8f9cf5c6fd83ddfef40cfcd59a992",
    "056af65d988972cc7cab8770944f1999f5d2c85e2824140afcb3e0577f27517a",
    "0aa2806292db9a0e48123643cf5fab38fdc472472e52160219398ac91cf29e44",
    "02c00cb3cafa217226b7236279bb761c13acf564e2ac0ebbac960812d7f2a9d8",
    "03cff391d96c84509a51fee4da6e58a3602120ca0b955f0dfcdf5c17d82dc17e",
    "035c77228262f252760c606fc792808a37e91634975a26a2120abfad9db7a0ab",
    "0e11963bc0ddd94691ff25c6dd39cf7e505aa341472fdc23891804d21753f358",
    "01fda3f98eea2bb2c5dceac37015bcf08bafca13d8aa7e7e865847958a635b50",
    "09ae457ae4c89552ce42299dda7281fa81e6a021557e6b6b15515f040903832b",
    "055b3f1d382cb6157dde854823f5cf0447ba17a9ae443a7fad65b21f5ee815d6",
    "017a62880635064043706625626f2ab2cf616948937ffd2e822ccd656cb48795",
    "0c71d6c74aab21447896645fad62a13a79e77fa27bc582bf85e7d0def33b886e",
    "089116b5a7e8d80a9d0708aec154bc9f8d78ecbe792f287494aec6374bb6698d",
    "018c6d7101cb3bde8106e542975d871cdb3504309f9f11352f9a53fd8dbaa5cf",
    "052227a24fc006877122a2a50bf6fb26cd1cf041f2f6bb7b771e88cb6c785d0b",
    "02ac0cc3b41919e300c7554136f53a154058e2faf9c78735e21c84806d569b12",
    "0f2e8681ed8a5047f98f7c0e2469acb4785d371caa54c95531257c2a3837fed2",
    "0ee7fea5917afdc01379a45dd26864f751e97a08676cb8e68b677c787c8ad9fe",
    "072c1933d19c41854d3df9ad7fc2d236cfdb71fe39a85adc29c05ff2839df097",
    "0c4c74897873f584c2545ba58b2315339979926426713fb9bf37399c2766b0eb",
    "04783e99bad5609f393a201d9ac18e38a24ee7912553b38be417017211577364",
    "0be0a9e77d1da153acacee4d896819b7eb0a5be96b676e2b436536aff481ef3e",
    "09e8d0a86946e1b7ab9ba2223c2dee7178256977cbeb3537a770c57c71e9244b",
    "0cd4be373bdf03018dc43c3211398cca756a82c40b5912063ff53b0fbe15b8d6",
    "0b22aa58bdfe59db686a3c6dc8068344a659eb981bc26a31d8d238dd21df64ec",
    "0e7856a8cb64609e6c13f216eeb85f0288884ffa0d93db75a1054bc436698184",
    "0f1276112199613af60f46321d04bff98a479fc70314bc3da2e09f0c407850b6",
    "0a9ff101d72a2504a8985829fdeded4083ed2eea023a732ac5e07beca3efe980",
    "0e8f725bb6fa59e6590d90071737b4a6d63291f0b1b33e6c8af113d484468e5f",
    "0099cd1e90b51d95f0fa29e1da34fb53f4a2c6521822a115324e8a4b87bd1e61",
    "0665ccce5dff751431f41787e0bc3f57e89add5d045d9fb2edd3b51ad7584e03",
    "050bdb201a3e2d0399f52e75bdade3f4c89f6baaf625ccb4d3bd1e4c15404110",
    "030e26e729837b6c6fc1aa04ff3359cf9bd602fe3d52c2eaa58f7ad1391bbdcb",
    "0f8b8d658a09a16554b1f6a2c4126501f942a1bf8f3d0727db2db9d60284457f",
    "069a95ceed2a30f3e77dcf06a38daf32ffb84c76f16e626d8b0c129f0a8de1dd",
    "072ce58019d04acc8a59380d6c798ecd020b500d97c1a76b39103d18f1b46aa3",
    "0ace77dbd4a28943ee3a8dee26b07cb74463732405250a425a602d0d164f75ed",
    "01debc82a1208d3a0ddf7f3a38b98cd31074f57cbdff0b9758a2097fce75be75",
    "02e17aab4fc20cf5a512bd10d18d7095b4819bb6d31f267caa0ef86e12215ab4",
    "0f800c47d5a79f871db1587487f9b4600feb8645f88a4e027f17e33f3c1725fb",
    "03d968da9b73f590f772f566d712bb20455b2ba4c7427f8b8ccd157262d55bc9",
    "058cc46384a45283b2bfde818dc7ee2e4b6660ed63fcd6516509ace9c15ced8a",
    "0ebf72dc036aeea4e609ee0a5bd3ebdde4c8ee0e41db44d02f5d421bd2aeafa7",
    "01ec3e279caa00f8d41e7dc2177669d983a2d523333ee31dd63057ee3be08f36",
    "0f72912b79c76297d178ada0bfb305510af1c6341b4fa7e977b71a1c83892a9e",
    "019ebfb7cfd51015fda78797fbc1153ac588c61b7f4a2fa35b72d7212529202a",
    "08ea9d85fc7bc51a4c513fce9fafdfe2e3ee61cf3677ffbfb6c544c23466b543",
    "095c61045244325d5f9c6521125614c9c67bc80c8b7f20f174004e7cf80415ed",
    "06eeb39964178c0fca5a7b41477fab20e328995a09cee554a931068b77e9dcb1",
    "054fbe49a5ecc6a15e7d373da3da95de859466f3303bc56d6a210c748914259d",
    "0aedb9ebcde7d351d513bea66ab7db6501d9cf39779e0fe9287931e410de6251",
    "0ee39a50ab8b592250310a084be907d3b45b33d6e2dfbddadb67b4fe62551c1d",
    "075ae58070119900abb58437e2c9850b990c522d9e5d5a432e2c29dce04a8bd5",
    "08bc2ac5d5974734327078285a5fe11a0d3b3468066241538933f623ca7da184",
    "00a16b25e64e45f94aef95b9d2ca43ba1df71f16a4c513b9d1892306ce2b2c53",
    "0f13ca5f0932ca60b74b6d153b303845b09410e2f5e56336eb9ee7b8017bce89",
    "0bd99b1b1f620381e0c2e75ab58335498fd8044917acb03aeb3788204012cf5b",
    "0f7b6561ea531e8209c688fa4d2eecc77907689a29d21849b254921a5ecc7737",
    "0b4ff76df146452e005434c56fc09c31807876e1ad71d5297ce36726bacc1df5",
    "014e5ba9e3dfd5fdbe3309d43312cbb7f5238d5b2c7a6c53375535956aff8fca",
    "0709341e65c72932b3396b835a0006aa5c43adfdfacfb124e8fa0478d2068cae",
    "0863a2f3552bafca36f1b57214f1341c253f1d4a271dded083dde4fe3d9afd85",
    "0595f19b42756d903c3e4590e1b82d51ec69e8c2eeb44130a3cc633b8d02d16d",
    "02b441f9506cfcde7c6be83f995f98867413baac6bf0e9e51ef0379598b25ba5",
    "0e63a196f5d09b6799835e70a7ca4f33d89b9e495a1362ba8c73805e705f39ef",
    "069b1193cb9a1e43d0b4d4acf53cf7b7b678e143a4ec1d1fa0fc05548e392f7b",
    "0193b75ec3c42cee2dbccf49a4622a7dcbef2331962735dd95eb9417582ff41e",
    "061c238d656634fdbe9ba6a58937c7c0ae69de456204613510cdacf8d85051ae",
    "069da7231f0b0faa1b4c7de8ae23e41f7ab89f560619dd25102a809d55c2bd71",
    "0b2b5aef2404f6450e4b56941c61e155cbb910bce977900dffa9dbbeab6c07cc",
    "0d8a2338679d4f1348c15f29f97c281ba4b7c758d4eb3fa9fbbf642ff9e2aaeb",
    "0d5186919e2142544092294ee812dae2504e38eec0daca21682ec0f7b7524c32",
    "084e3c1ddd31d23403bfd2039c19832cb7785caca7d34655c5f153219658fe0a",
    "03417651549b7b7ff559b1db085714211bdaea8be8fbe5cbbea40ab4da8a08c2",
    "07afaf48f7295f53e484d2a387f7b9998db0886e5eea268f425bbff33fcf0c8b",
    "0170b5ebc071526968896c2e82a61723c49c255f34f89fbb8f07515adb6bee96",
    "00280d0a2e230d15eb8b76e8be08ab1b1e04f2b22b21b243a69247b65b17330d",
    "0aa67e826c9d3c1ddab9e3ce8e327f26ba8cd24ad6aa896187a26e941f80c500",
    "0a3efbc8a67368d7e9e02896770f0c313aa1abca152e60576fb33d608d18c335",
    "04f0525de2f122db30ca7cabd07b0231ca2db19876e611579b3d5b312b053c99",
    "0428d6daba8d8e2f6f3f133a2db9ebe4181cfa1c9762537ce426fe651d4c48e2",
    "01de28d5c2a81c67aba3ac6e063135e8b1c4f6de540d9343beb684fad79b96f7",
    "0276236f84dfc87078e2d7d0aec9c6e88c01ee3d52d5957f0cda06500fe1dd87",
    "06d6c3556135482beddb548e5b1e60b2286abec6ef52a4cade1807add6f2d696",
    "0dd727a92355d0b742f2bf4bf7d57e955e0e2b791d66ebcb96516b0e3daa6a81",
    "00e8a59062cf84a928eb423e8ac0f6723ff6bff604fbd78bb120e0060d684983",
    "039e19865c7d31ce33bc4f4754d9a7265a809f9facb1ad3a4df9bc4f892e1b8b",
    "0356299e7e218bed7fedf1e5a8b6908c324cd6bd6730ceb9df2c4b33e7de33d7",
    "07028c864cc9982cc798ad629e40e144e285029f2482ab772a87a969924367a4",
    "03ebc6822c442a72a8b0ae4d0b59331b06231bb3244a84a53ef6282ca46a41de",
    "0f68190786da26f74c563667e43c635324c4f3b24a180bba8fb4245a26ec17dd",
    "06627213f93e6d3a7a9ab3d2a7a8b14b821034cab69aa33d2d21740151b8ca92",
    "0c3a46e49b09991affcbe61eed7b37575b9f0c8afb5452a1b27bfe0bbe1300e8",
    "083d84db125594cd0988058a24e809f93041456a339f82adbcd0eb634f5fa0f7",
    "036d40bd8dd0459f5bbfa5894a6e4874e718fba0e9b9260d95fedb9bfc795b8c",
    "0607206508f2dc89201c226e9e8611ffaf63c3f77d6241ee926bc38a56f45065",
    "0aa02387056cbe2ecfd9b8209a1e879f027218a1b5f05f688df59d49e9f40dfd",
    "0575e2d0a0a0d5cbd298436fc6346c26df2e9907349afc57d92348dc9abff5d6",
    "048919adbd4f1348f36c3ae6857883a5b7cbde30200592360df0f64aed13b857",
    "0bdb8b542026eb783499ead53889aa0847c27d79b9d21fd3abf535a6273009f5",
    "0217f67e465df604828296f17dfe71b6520ea79297cf08f8733c589eb8b2e06b",
    "0c276159af6c2e1b3e46ea233ad504710822fb8401beadb7cb55e5376e77fd88",
    "082b6c33c92cf9849d0429ff8c54f9ecc32922a0c6a96db35527ff443c7db134",
    "096adde6ebaf18f8e0c49ffb2e1174c9cacfe3b8a9420a252cdb7731757dfab5",
    "0dfd09a6a9f681dfa5661265046d9095748781f473d192664afc9a2de8b15171",
    "0fef22c9f0cb2a97d9b92ad026fff1a395271751c75dde195737a0b13702620d",
    "00c7762c34f7a8f9ec0b930119e57f741e5a3ddff997a2f4ecb238b3d4168958",
    "058cbf124d8edd6c8a99bebc900961a3ac7f78d9babefb589a83a5c245032da6",
    "0da2b4d1a0a023be916bda36d653cde53c496b5e28af84e501151decee7c186d",
    "0ea2774010b203288183cbf9792d630d1298bacb2f5f701f30526f3c25a7ae7b",
    "0993e81a0698edfde19dc385f0535ac0e45300424108a5b5c6da2aa303f220fb",
    "0735999c63286082d593549e1eb758038897e07acf994aa7136c74c97a05607f",
    "033bb6b8b83cb47f34adbbf15549d4fa8c437f324ed35a0a9fe13534cba43738",
    "0b5ff362b0b15368aa64af6328a1d4bd3cd47b486d54a52a84157da4f60f627c",
    "013678e7f70fed22368cd96303ed765b7089c7500dc52f9fd8962c33c0cf7849",
    "0d8565253a3bd432bc1feeac64bd77f0808ecfa3b7326c2a5e9ee0e41d5fa55d",
    "0ccb5a451b1600983b585e7afd5bdca86231d65c89f66069888f6b2979876010",
    "0eaf45a454fe4cf40b79b4587b74ce9bb2f7023ff425240e369cb85ad858df3b",
    "00fec034e21efde1baffba301c36605f1075c0be01fc33e75b16579c0c27c184",
    "0085cdf057a283a9875bdcc0d75e6e01b504759737913f53a555831a1c22eeff",
    "0f6f87289a98fc947447793787f7a3f41fbf9919738bb1b1f2a4d31d6ce33967",
    "0ad1680c02a213719874429ad86fc8452c296c08eff5e12f02d6803319606a87",
    "0607991494e089b0eeedf765325ce4edd372060c574443af04a1ea879b2bb16f",
    "025d6f0c5b0f4bd365f00328bec75af32be36cc252569592ab8857746f8db5c3",
    "04eff1388136b2c688a476b941d169795075236b54b0a71447f87c288ef9cc25",
    "0f75f6c2837d5d85bc3f9166359c32c5791498a190416adfe7b6b49513e23d02",
    "0448a03fc93531fd78202c9a922caf24c23801c404cfd3350da22b7da63e9d1f",
    "0da29d628471178ea343059cdb935c2d9fa025e9c8ee277fe5912567547d2981",
    "0a38d5cddbd894bb90abe9bd1d23b155db41ce44e1d3b92f949a1e2ed1408011",
    "0e38598799f4fa6e1383cceb4721cbda545c1d508b46c6f36fce78e2c66ebb51",
    "0770081ababc609c5aafb943b280941f67c0385b683c2e8226171143a2728995",
    "05af7e5b255739c3e1ccce3220641157c169df3bcc20e8d5ccf359b3592ee84f",
    "085e0a51ecdb734fa3ede458daef08661fb8cae62850d2a2721ee8092717aec5",
    "0d3f8634e00dddc14bb39d19cf05858dcfff462f8d566d98fc4b7485c6e72b99",
    "05ef04a7e539ba510edd5ee4a145fd31cbb7476c7fa5e7a1bfd241b87956bc1e",
    "0cbf08a62949b07c9048c54693c2b6f4d62078511d26da860d4e66b2f1ea5ef9",
    "0fd71150e0ff0189f92b0daa6792cdf55f7c40639b24717effc297645af8ed1b",
    "07cdac2cb8e0adbae69333a501f3622a257185156a43baa353251c8ebc9f5975",
    "021d3a837a2d132442b38bd48308cfa5dd905803b9ac62849a0a0fa16c852108",
    "02555c40750200f3632d386b139179d4d3d83ecda140cc62f22f9661e934718d",
    "01e3c95bb90d45b494a5e04fdce340d4b4dbc4764a28d54816deee99b3e28b50",
    "05290e94bae497da5c2d380ae74de10c72b7b97777908b88595fbba9d62ba5ae",
    "06b60c4b842a238cefddf8e04070589b931bb473a83978373a70e471a849dee7",
    "003bbc31cd9183fb4569fac3f69e87872725042f87e25e885725051b5ee66d3e",
    "0b223452e97d64b029c5e34b50b73a8cc812b4d2297f47be5e9abb23599ec574",
    "08095629bdac2047c58ccea464b41ff301ff341844c29d17ac2eac36b9085445",
    "0e24a15a761ccf97841bfb213bb606a312007149d151574b969abd2b51e03105",
    "04c8fa2fa8258eca3384a1940d34c68b067e824b4f6f9e06c31241cf85ee1497",
    "0a80df2f89d55cbe13894ebf9af99ccd6dbd7651bff1d9fbfb89c4b511a33f72",
    "0311bd8afa6faa4e4c52bff974d31646a921a6e4fff8cfb091b194fee46d21b6",
    "0dec4a5a0f4d3323783d7bdda2b15cdd8d061ab068d1a53e7a4cc754fd1e0920",
    "00a026eb9de6d23caedd212079021e22d8f50c387a056302e1bdae5b38f97f05",
    "01b200d01e8385d0badee45927b5c9c6fafb831b3c013b9b5d784b437320c70d",
    "00d5cabc129f345ec33abf0f0c7708c021b32985ad50d1dc525ada8360b55e93",
    "061c3ad88fca3f09fad86ae40b0c2485772e63616a90244eae7bc25455f9856c",
    "0cc2f42218056184acc76eddcff32ab1e53e45865413e1da3bd727a682217ff6",
    "05e57ee2c7f0d2589d0e28a8f4c04a014e2d1cea2b0dd17ccf407f8c1b6b7154",
    "0acf3d0b9b0a1bd7cde4702464147d69a025a5e0f0b089bb45b15d37a26b9314",
    "008413f8882a50075bf725953a0f4b9bde4e32866b071a6eaba545387889ef59",
    "0568120c0efb404d890633ac40a1d17587680c9b2942f59f1bd81b19cf1b1a16",
    "05de108e7892e6c3d3586468c3795f67d7b34521856fcf004ecb196ac42df80b",
    "02752d5bb0db203b1d3a6dcdfc4e0c719534a08e27cecade2dcfc7556345e57c",
    "0ec546288937ea4803470a4ef382c5d433f4430050a3aa7d88b794fb329e9563",
    "074353a325b448e3f2f987e11e09668d69750d3108ed5444cdf64d5080744ca4",
    "025b3b1d33b3aa6954c16ea1359b52e2186e84129e7f543c9ced33238b28c9cb",
    "0e24d51d02cbef00ce84ec80ab7eff8dcdff76b49233253b1ba0af34e4cfb03b",
    "0f474331c19c12121bab5e80b02aa3853590fbc8aa2c2603decb7c8f84bce4ee",
    "04c8a041889bb04ed8acd5840f138f1f6e7877ec544a5607ea1a5e9454d5f02f",
    "07f9ab67179ce2b2367f04509226bb0acdb6a5c4d706abd0884c5fb46fb4eb0a",
    "0b922f8e03621dc8e91eb7f4d4dac42eae8481b5aa5b14c22d3f82e2dab66c77",
    "0bba775b7178d6a7db88df22ff4a3a4d29ddcf7c315fedf6d7bc2e003510a1ec",
    "0529b5534b8b01078ca7f94ffc40857f68adf13deadbdd1cc05dbae1257ce1ad",
    "08ac3a025b38c03f1c1f4b4bd17100b9b34a203548f692b81b5489da4a0a51ce",
    "0ccff02c1c32ecfe7481d969ffc13c4362b5aa5de2856e32f9315741c133212a",
    "01816241a0285ed7876e988881c49fd53385c97bb0bdaa1ff8f57eecfe32356a",
    "0fe575b992cf568158c2de827a10717ce80dc11d536282ae958cb9e6d4453c91",
    "0687f83858d832894d238decda0c51f62f0ba1265e92dd3e2e860f9721b0e686",
    "065018e5abab74a5e7885c0ce11083916a3bd30b072030b6d1ddc745e1d0e204",
    "09bebcc48c2d5045f1c7135a222e8b14df61f40f5c6d72751b5e0f82180f6ad7",
    "022634d9f471093db1d0d91c89a00a70005367fe5c5af883be3fbfc2b340eeff",
    "09d09be90679047f3a675914dfb8ba95cc51ff71641073e55633042d42f66223",
    "08a96ccf78caa9dc0278ea8b6e18451876e5095c57be621e0c39f6cea74088b8",
    "051a61d88c49ef4602df63197f2728842ed3c2fd3b3a47bdcc6f65055c1f51b0",
    "0ad5985109fcafa2a40dc4aef323d270e464c7be2910e35e946d940846103a8b",
    "04bcec8168ca3dd59e710394590c4c2cc09e23f51c7f3078bf2c727d6c58e9f6",
    "03c569eb298bfc842bcc9b2aada1d2d7691311445013da26b8fae7d047d463c3",
    "002adf987ed44fa0e79450b151c857672484f0b2a939bfd71a1e20ba52988fb2",
    "0b351baa3c186fca3fab160b0c92ab994542c4784f5d801637f6810e1f4086aa",
    "08d9d1a574f013c31a1e5a3ccf2d6a5f9d87f1e18d96b19395218ba4a1aed4a7",
    "07a69e27cf7a13900ed599f1b75c1a4719a2aa773977fc0e649e4dbfe55282f7",
    "092de6f3cb0b89af06cfa6e1878faa8cc343561a99907e17144a5ee58c5e9f28",
    "073af9ab1f0472dc242a0e7eb9b73b58f1f1425146f9a361157cd2741df47460",
    "0fedd96fad1ad4113ea61fe185614a80620816c070fa3ed7c73e016d963112f6",
    "0ef90517ce5a975c5a03a872f5cee9b61b7ea0761c9fdece2615e45bc240b94e",
    "0f4e8f950ae5a241825cf2b7d270148ad30f08eef235d75f01d69425f4a0194e",
    "0e9f8675f56a81e7b40ed7d44c3b788b4c39e24a653b8d6c19359953e6bc6552",
    "02007a894187c19b2dfcd37891a577a493f68bcc08eec0cd6ec6ee1ee60e1ccc",
    "0d3fda06862625a5b66870d0f8abc98b7d44359332f77f7caca25a91b150d509",
    "0da569b715798ed8f3893d0b322defa982cecc44f317e01f40e49c2d504c84d9",
    "0a0e58161f50f6a41b23b1782be41f5bad39bf0f7d63ea207c77e05ec935eee4",
    "091abc2ed7f266b0df7ad5c6171e96ec08ac0cf3d094f7449f6b32b5c4a4d64c",
    "0621049935f52779e27297f7cb0ec016fa1f5e09c13172947c3b8d9cdf3defdc",
    "016a3112900caf88e1c188ecf197246d89d6fd0ab53dba6afd8c4e5df1d7e2e6",
    "01966b926570e464842ccf0bdeb590dc9fb86519782c2a02f8e412587d4bb7a4",
    "051d2c934961993e3f15d36aa471750562102f37c65e7df47387ffd887c86306",
    "02a583304904bae1178fad6237dd8077926af3eed9b99ad27472158536fb7d74",
    "0994106092b5f1158dcc4f003b08a0299a8479a31f5b5060f6b66de6e7e70b67",
    "07de36ffe92f38748ba0fb055d79388e918ab313ade5a4e870f1ffe7270470de",
    "0ad9c7e1eb8104c28d48bae4e0db32352040ee42a52706d11bb130f95e7d5209",
    "02052d3b33bba96bdea524785a80219b1f34a451fc20d467e303f0a9321fa5fe",
    "0d95536b2457564fd4f1f546d9af5cf4c0cef54de458b17b0a3b47a79939a89e",
    "020800652b2ca5059ccd1b562bfb4c0df9a86f9f6816bb57576798dcb38d4f70",
    "00fb2269b66c304678aa3a25a7edec832d162827a24a93ddb070f804e6486b57",
    "097de9ae79004d375099869f5c8db9caca9195a15682cd31e174c0528736046e",
    "055eb0097d69b3cbb20f2619ad3fb6d4fffa77d906cfa056a0e248c28782c5fb",
    "0af5401fed433eb041efa33d022ec2c7086d727b55e21a20d930a54951c60456",
    "04a7017cd8dcef6fa9bb9172a4a33b04a8d070986c0d43be4bb67353d4bce08a",
    "0f808a565ba50e8a99f4ea9e4ad6575ef0d03b1da1c3fd9dea2520cb05c270b9",
    "02ac80c34f74177f20b3179c9e0732c220d7831a8b515138c7820466f72f7b6d",
    "050d430d7942fc849eb9894dc5a633e8b7aae306886e8d33f8939d01aec882de",
    "03f47ac65061aef4f9a47524a761e2795da0f4a2efaa19191b7a9cb3e2b5177e",
    "082bcd27f07267d58f254ef64e00fadb22ba743d0c0c8cee00fa625b577d0013",
    "0c96b273731c9863b0204bd3cacf36a8cfdeff8e7e54717d68f2b6c46a8a10f9",
    "093c9dd970b85ef80a047b40f72602b36d80c119902d068b94c9df698580864f",
    "016e40b49d328156457e46a6a6c3ee1e833a93d5d0f1c1afe747da36e301bdd7",
    "0ecd1146fead5a4898357df0e2046c19ebe52e7c2a617626d6debffa22743efb",
    "01bae1c11fb08d760dc2f2890336743fe38a67ab6a347cf884bc7806db7b9678",
    "0c9a026edf4bf2eacb16ea350ea98ace2e5ef21de19a0a5f075df395fabc2a1e",
    "099680671d8752719346446a22837d3ec93e5b0aee68ddc780ba7669aeae78c4",
    "0d38d97735ec571b58ddfdcf33a011869d27a865b0b1ff27b818897e784e7ce2",
    "0bef8035724f68b25a5fad29102848cc2e7387e68df8b8675c92947c57098240",
    "08190fb0620095550e6752ac8837ac7ce0f535b6b954675398a744cdbaac7e63",
    "00475b2e56f9a9293f01e7d42a7ac34ce81e75e90468dc56f83d05fcc8e9f0b1",
    "0d485b9d7d3789720e59e5073311ecdff9543265ad500636ac1a08a2a68f4a05",
    "0458a32b52977504b0dd963023f1d39456e8bdf48e1dc43f22dc366a0708ba20",
    "01a9e00828ad71185e92d0aec539ce7319035ce68f01ead5bb6a764b1f4cbfa4",
    "034fddf0bc43008941041464d4acf831088a5b7a2e0f8100c43c958550c82b7d",
    "00ec337520026d51489f9114d7c4f7b4e53a7ec9941728008f690ebc5d2ce99e",
    "0f8f1b000645e3802ebb20ab74d9e918f7397a4136fa8c7542eba68679e69d5e",
    "0ea24325564f425f6b754fc11a2970ff57123927492f3b375d505e959843d1c9",
    "017ae72088e4c4377fc37ca68e0a92f4c51ab89e00c79771e111129cb1b610cd",
    "049b350a05cc5e2847949f14e66848504c35760c1ad9e0b9371cdc6bffe5903d",
    "0818a4db601396412961e2571495aa2cff37f002131da232a06028ad70218e38",
    "0ddf2e001a6e968a1fb3b39579099c2502f1288edf67c46772ae20b1d029e353",
    "041d3b250cd9805201977386c85161901ecb8787582fa19c7d831a6cf935dd4c",
    "0e0fc54dcf06bc0c72732c179d1c07357ed699a92602237e27532b31b82cdacd",
    "01b3f20bab15c3eaef7efce36f5925e6334a9df85da313b0adf5dff2f2e2e360",
    "0d4a7326b978a9346beec983706770831e6c688433065436d0e373e545f992f7",
    "0745c5f6f2490519d49d1a08ca23bfc2c8abe78d5481a5deb00ac6d564ff65bb",
    "0a021920c6d916bbce1e079a2616edf1c2ec4a8be3234e1e1d7098b469b866d7",
    "03c8e3f6435fb17ad9801fa81097f7a40cb6571fe0c5b21788e507ee5c14916b",
    "0224a63bb47d7d447ff13dbb82545bf4bb183ce29c05e587333cd9a0b116009e",
    "00ce86b2dee668cba57a15fe4fb3f656669a3d832afc726349673ef769464d06",
    "075efb04c21e2c9e52447d0c13496d3b3d6eb369a3201d619e06351796c9e88d",
    "0a4f76186de7c095663866b441b2d34f6ae240256ad98238b7c942c54d8a46ee",
    "001a6d1a3a2d1dbf2d3f80467f9706150d1e1db4bdd182040489b8c81c244982",
    "02e4e4da49c1c193b6ef0b6670d5f1fa69bbdb5380c8bfa174ed9e6f40ec4c41",
    "01d73d282a1461edfed78f8ae8af8ad1c9a5727427d23d4e800e8b1748d0a766",
    "0b5d420b79fa0d773cd266766c97958a37851458b0bfbc6f246087d03b7adb5a",
    "0468cd811ff2ceaf6e609480328c669121d6986dd5bee9b0b3a3de7c570f6065",
    "07afc44fc9bbfb86fda7114b598d305833f730eafa9b687881edb64b7f01c2e5",
    "071860bafda2244d5cf038d977e31821f37b237ca23a088559686b849f171d57",
    "04352075b0331029623bd578dae96d1e222be6db6f879fe4ed9498d82f93f92a",
    "0549cf261893c4b4cc66ebc547e77033b81472a6843f6f23ae823202ab1a1a77",
    "0cc0a2c241d16043fc3f9c50b322d159df933e7d73b4ccac36281f31071b494f",
    "0fad5afc939743438a99c232ebeacf583f829e43090d5e686acd8187974c5e58",
    "0fbccb0bcbc5d97e154e3538ce5ae1b4e07fb9827f878b67d3bfaaff87cf06bb",
    "0d9eec6b5f40644cb5655afebd6cd0be5f2ba1b031bfc7553dbee5bbdcb38bb5",
    "0d568d73bcad8a161b3776ec4ad75ca7884d216399cbcf24537f91087d72d3e6",
    "069c8ba84d670eecf42f038c7a3ffdfa8d41289bfe731129b674fa513e369dfd",
    "092f286768edda1100fc07faaf6c4f6c0d471354c00d417ded1cce21061dd797",
    "080297168918ecf8a19e9e072a06344ec51bc641c93394392b298232c18988ee",
    "08c73a23d77d6b443eeb62bdc35882f6b2ddb8c9f842515ca63a7447e793e7aa",
    "006f640b3d443fe7c6cd3955d4d63458fa01409fc1fff39dec10f6094dac8d23",
    "0ee89eaae036c741945eac4129788af65d9eac9c682b2bfdf8a105596182573f",
    "03f8af33b4867a63c6a72097d542767def069845a7f74da1059d1ba35481daa7",
    "06088ceb4d215ed92e2947c922dd33e49e64605c144c907f001d1652b595c93f",
    "09562a77b036afb2e23efd15e0bbb1151a31629714766de475ac27239956c1b1",
    "054370f1b3a3712c3c017463fc451e455f97b106b3c3d25c3adcc73c04459959",
    "02ef8fcac6bb71af62622f43ebb150e5053ea967707bfa307c9fbde288ad5824",
    "0b374592350da346036d88b3c33e635f6c5e713814b2382064ca5fa4063aa799",
    "07e8c0f8f2db9c4a91f3ca9ff67d1c7da33cf48b200b8ca22636d7dee0499542",
    "0bf77efdb4e829e00b80115582d89955faecf543b4da0237f7ca8166aba92fe8",
    "04459b1a221bceae2956c315ed1574c989a4fdcb72af6ec34cbbb72f4ce60a28",
    "0ba2c19af33db940bafb2070e038d662885d4d5cf0d6c697d490e3e22851dcc5",
    "0d88b0460f31b3b21e70c25d5eb691a16acef0723890735da416b346fd71f06e",
    "092d1dd170384effa4789b546ef42d1f49b6cba987d2d70884e7b23f323a49fe",
    "05d47be5ba034df42fabedcb391272e37f8caaa578fade1c58cafc543dedc7ba",
    "02ea780a6fcc6565cd45e357672839b37bd9a7aa50c308dfc6dbd1499dad6078",
    "0e41242def8b9d3093520698028b8c8611c155d8193ce95a45c604194fb29f6d",
    "03c161803ac6bc2ec01921a04350aa8aa25160e6902219de09977a04070ce126",
    "09ffc31dd8f1d43fa2e73ec8730dd07e56b79ace24ca6896bfe3f6918d73d418",
    "02ca34cd37406cbd1f9b9d1c575df5f4e0c1e45642502ef7ae28e7c9fdc443e2",
    "0e4d4fbd0dc21fe00c6ef4f5edba346c2be299adbd915eff23cf0db574b0a741",
    "00b7072e125d83b2c8523b4d59c4deaa20ce578fa0d7585118dfedea66100d6a",
    "06ec4e41adf5995f8af5d795f108179d6606063c52cb1446d94d096857770364",
    "0028a4161eced5bf922a58e30a232b63fce7aa35f2c6423a784f4b388a65319d",
    "0bcce46556fc2cfc6378e398ce371f31178bf3d753b0e60ef7e3e7ac8f9d635d",
    "0e605a89dc0edd1e9312ad1786cdf9d9570ce5413d167c074e773e27d6f3e2d6",
    "09d865fb76f9d947d81a800a47d921f9886868f81e1317cdaa95eec1f611e031",
    "0a9b4ee4cf9aae48abf4e57a3d6083f646ff2f093e03881dd5735eb7294f5417",
    "0a12490ea21aacc155ea1fa75172e77a176a68a78818450d9c12d7e57f113342",
    "02e4616443e82f8b2fc054d890904c4332201b07988b68502cf75295eb72f18a",
    "0f3db3014dffaa512be0cb7d8beb779d00485b72edec365b36434e8a7a8d71cb",
    "062ac9d25fea46e078a37fceabd7c9e344b3081f864e6d9830d78eb3e08f5e9c",
    "094f13e745a592da64c5687beaf89a9d91e6937a8f6b3ec3e6722805f1e6d340",
    "0c98546d00449bdc576916fd0de54822a6ff09aa78c454723acd59fe43790036",
    "0a8b84f4acc30777eb892fbb5f19da6eaa875cdca97a70a27956632c231c099a",
    "0c3e11a4702e1ff7f710593e6248ccdcdf6ef96d79080692f0c9058f3e561227",
    "09a551545b4fad42e89b40c30c80a7ac6d7872f5c3016aafa09e6791c6f123d2",
    "073de1a41744414661f52a811240477631c9d4ede5afd317c2e5b1d6d93dc4d8",
    "0be650a4a692f8f2881c63ba5bab4afc2c262382d2a80e1488c856e233cb2d8b",
    "06ed751c4422a681aa4c470d542b734609815500f7f695a58eeb38e0e49f6aa9",
    "050dba9725813d2c3ea68c057161b63fd41d899b6af76867cd2f4f388cc34361",
    "05109951dee645546531225d42348312504e4db94a511e49a43d6b1263c2ea8c",
    "0dbd25d21ba680e1b0fb85b5aaf249bb77187a5c12a99a85584e6cfd7cea6f56",
    "08010681fd9c9070fb69d081ac37caa8724f1ae37857b98017a8bd1cf37a0e38",
    "09d7587068809940ab6f406f80c85d59b1f83ecbbafb735baf8b24eb953bd5de",
    "04349c5f58605924d33c38aab1e0664b76a57af0b872f625545222348bdb35e0",
    "05dfa751a808c42273c53357afbd83c8ad4723edb51d6ab970df5bedd8588e42",
    "0b6c6d720f2e43def6176c9f733199da7c5d472da244cc5c15879e296eee78b3",
    "0068f45dbfed1e977e7331611b4502fadf7ab6e04a19916808d2387dc0679234",
    "024a0fbec7d1178aaacf375d116c552ad99c30a6c06c7b2fc91171e5d0e0f759",
    "01f7219345b35370bc0f37fa837a796d36db5413573d175e86e842dcb9c91ccc",
    "0485d4ba6ba3816bd150674d12586892b135e1f527e407d1a4a50e6853d4f1e8",
    "0db11f07d1c5379e2a8a36c5bfb3b4342da67c64a7f74c82598982d460038158",
    "02cdb3f0177f4d84e674c7ec929b6ae88d3dffdee222844fb47e5ff8fbb3e224",
    "04bd9c1edb15049a72baa3b15115ec0c2daabef4d1ff6132207d75f7fe0407f2",
    "0c527feac9fac8cd2d8a765240f99ac660ea388df68ab2ad4f0c661c1624fbff",
    "0c949f839278cdc8dfcf5cf1723821e9e0972230eab89540d9f28b389516dfa6",
    "04735896e90ccd4c7de58cf7bea4fa420ec2c3be7917d42b761fd482c8744f5e",
    "0709e0a74f55bb965c83c44e276363475047d90e6b882b8b66cb63ab963ca704",
    "07c020bbc7ad2d6dd448d58dc5460399e69bee109c55dd8f70f2206c58f5f048",
    "0a42bcd5315c2ef5b16f8b1c6c4b79e798461de3a739deb7150f55dcde901aa5",
    "0b8b74cd0b8162107f57fd45f47b6db7d624a23e3609d87ef0d035d4c60d016b",
    "064107531a6babd407097397c488145bff043befbd980aabfeec7065dc481aa0",
    "05adadd1f6f56a4483d7d59447261b23c66f3d186d08313091eaa53980de7961",
    "04efefdad9323852987e8c370175b1f55ac03a5e88301e5456ab256541fae329",
    "033cee836a6cb2c7a2b623bf28045928ee4842f26ba5c18bf733d00e3aeefb6b",
    "0596d7bfab599a3ca3d4a1a8b83b1fa2be7ae11c9f3d06a1dd26acb779b93cd6",
    "00f42e55fb2e3c834f5d0ed5cfec74f729e777915e4e1e09498bf3ddafc84a08",
    "08aef3d7999a214651f41cc377fbbc26e5005a90ea1110d6de8fc1bece182765",
    "06c6baf197763faf6ee96f29443e656f161ba08b85e4ca116070444d43d98c6d",
    "0e475bde0da5213a2b464f08da8aa9939a384a5008609408bdfe12113e1f0f40",
    "0629e6d1b0685e2a914acc050b1fd3b6ad057c509df5e39116fa939952b78dc5",
    "0b8af180487b48dd25afbf6cafb05dca22820469ba58fdc31172d45cf8d4c057",
    "08c4150bc57a9646124e8f2c2e9183dd5afba3345e9e892240bd8045e316bc4a",
    "0aa9644b1c2751bb10e52a238b3b2a35724052cea9227929813e3ca20a4d6a4c",
    "02175d4650ad1a4e48f917a3716ae3ec5ed140b9e38dcf299c94d1b648ce2f1c",
    "0df6c1abe5473b1d60a546ac0a41da34db7e58ab1bd8e914738ebcf0de5fe132",
    "00ff8a9c66d88ec0a005f369d35bb9048b688cbc1cddb77d70bee042714949ca",
    "0ca2bf30e18b2737c154c88c387ec85dada92cb7fc4e0fca3a996fb5a8736d3b",
    "0d8490939b523177579934a6f6c303aa8fcdb0879289f56f1c83e9183988ebc5",
    "0f08093c70703cb55e1eca020c0f2c08e271f4f31f7358e8b464b2716d28508e",
    "06e634793438cc2f441cb736c893dfd2d00a3ebf0fd609d9afad0c600a3b9e9a",
    "0837594f2aa9d0ba0f1460d151d0597208282a2d180af5038c5ab9f78aa5050a",
    "0b3c8157d2a8f2bdca73508652e9b3cfd34d086ccb909b24f429030df103cc2d",
    "05c221edb4e996ae577f99f5ca085e65e69966c673ca230d83057709a9c87114",
    "0ccdf17fa77de85710ec9484812a43ef018537225088f291a22a61e016adb520",
    "07b0a9635dc31c465d8fa9e4d6049c170b98843fac5b6be9614fa89d08f90bd4",
    "09bebf834e44d9876a13a2fb90abedd79f0e0f41665e69fba538db3481198cc4",
    "033c2fb7ef2f3b7b2d38e03cc931fa1f6ab40fe27c909c950d1108d5f24b5448",
    "08521fe7c555e4da94b4fb6819cefac5a90629676790fe5b8d57f4d0d3705ae9",
    "05cba2a377eba61980f4761c3c571d45601b11f835e210bd632f43d9d04ffedb",
    "084979ad66788fa49470881dd39ac44fff825bf09c2d626eeccbadfac202a45e",
    "0831dad911f2da5a90502bb4dbf87a57e4b188964573b4a8985f4d63334129ca",
    "062295980278dd99a408427f7a081e92c177421dcba5a64a281fcc08c74f00e7",
    "0613d87e449961009df3be650568d19caf0c6a8ea0fc25151c0cde816e3fc346",
    "0c5d66be388071b4cfb94fe00f25a1522b0b441185d3594d253e63ff7131ce6b",
    "0b22f2c7a543cfb4104b2cd4c52b5df863e6189997e183b78257ffb0d5cf3cea",
    "0970baae3afeb5d682d3c1777d973e432bd242cb8b0ca6f1126c33344cfd062f",
    "0365777e46d9975ca5541ca776e05a4e196863b839f453a8c26f63b155b0e643",
    "0697d8f70dd5ab6c38d6197a655531e26407f1d423bedab1154d27d49f2039a7",
    "0bd4f025eb578e278eaa06d66c2bf66e52dc1617741a582d2d1f0b841cc3589e",
    "089841202a055d5ea1405757c9fd9596bc1fab4c4fd76a533a2af699ca2e0a5a",
    "05aedd5d63d6f7351d84cc495bd39c5685d274034406af78e65b6f154026296d",
    "0fffaa9521c95cf55b9edc8ce56d93def563bf6080fb48dd8274d51030df8a93",
    "01b3b1d3ec89af0f4b89b7d68b4cdbcb6b94439abc93f676a4a5b7976d754936",
    "0461f1ae3936f15ece5e037d0aa63fc3f334f70ea2d1e9b20e9c987f57805932",
    "00cdb978afebcd0e89d5a9fea210ad59872f039da2b634f98239b4b4d0233b70",
    "01183bfd94357946ad434e0450c40f2dbc12307f4d228f0f80d806ed4ca315c4",
    "06a75a8accd3d9cdf8fd88600a70b749278597a050db28c4a650f2b1f585e813",
    "00363e6e8d7fcfd9aa678637412179ad59aa43906d4d39cb4b69c113d7dd3588",
    "06ade63044d3d3f9cd6a766d96c2e28338af5b6363af33fb2f651914b0e46cef",
    "0d17b3f37c6bdbeaac9e7d7dcbd31f244444b2efcb91e1bfba3b10e4db8e8e73",
    "0ca1f03645c303e10d16d3d25776b035f6307d94d9e33596959c8a9f592c3a09",
    "04d2d39295b1a9aea1644ab7648b8b5b0f9672d4fa1e5ef13223cf7e03b26fec",
    "038255bc141cce440d4a9917aba951b4638faf25bd3133e71bcdbd3cc86567be",
    "0b65acab53b3cc3ff732c840e0a3de427e11d009f5b44ddc1ac637880af1dc56",
    "0110acff52c70d0b69b56616f3fc3931dd3128b12c33291d3314edc1263e9173",
    "0de1365e3da4a07adfda7af96174025f28b9de5bbff1f344dfb684290371affa",
    "09244edd30fb5dc0afe75f0edbffe660cbd970bf057a36d8c40c38f3978ef684",
    "03575b04f8d2cab379707e108a6894c8dcdb363e1aa30326bbb418730f849ae0",
    "039b336a0b5ab8d0f5ebd826c08cd07494d560e76fda487169b232f4231abdd1",
    "0f6e8ceb4077df8615d5d3c4e083827b6cef2281efa5a790443527c7a221902c",
    "0e8b2f58ce58d54771cdb86c6c60372dbcd238e782255bddea6d5c7fd6ec9afd",
    "0966b3b8aca384a5d423ef43d3101dd7537997773f2e94ca523837d4de136292",
    "0fa2474c3caadbab4cd7a915cb9deb6d8070b69df4f04a0f45d23a91448fee50",
    "03c21e277216f19f2a7ab4852cfbd883648d147de55c44a5dcb515739d6efb3f",
    "006d15b081dcf3d86d2183369630ab82644a65c70eedca705bc9e006e5d445b0",
    "0590ae38e96e8f95875e021004fdf3c9a7320d766eef029805160b7176852019",
    "00eb6638a836d3f778edec5571cb905f1455c8dbe8268b6ca15b7530c711a204",
    "0977b4060bc2d73a4480eb761481db6cd97c11644ca3b316c112343956b5adf8",
    "053a776a7f563af78d11da664e41095a03dc15f9c128f185f6e99522df04c7a8",
    "08fb79ed4af666bbcfdef80b05403462bfb93db15bc943d206b9ec207b0899af",
    "0ccc7cec038d06972c73b1717e1b44153962d0e7878085914b83cdd092f57d41",
    "00842bbf94902acc8e951a121ac6c943703d8b46aaf93c4caf0d808e84a90a18",
    "0e8119032a78682a5210b660cb7f7e7f03bafd5bae0c631af657e4b1510871fe",
    "0c97b737686179cd02d9ccd05702b0f342dd947993ad87b7694c4b9a38cd7771",
    "018a74774c4913bd0a278c7979899ad5a262273573dcc186f9ba5e02658c894a",
    "0883c3842ae1df5610b76e1f7271e0be3dc7f4c719a7741e2f31721c58d0f12a",
    "09511808067b4336ed025d4a3a7dd5461c5866bf8f483b2e25fe1319ef71583a",
    "0803bed0d528d22243ad3e5944a154f80d2ae309ff20c96d915181ba6fb5c97e",
    "0149f5b97fb96228e28e0d893ca5e223b7f9726339bb0dbd1a8fc10ad0e3748e",
    "02c5e5fb71ae824a6a26de7e9f8bd2ece08f9757de61b4aa6216edae03b30187",
    "08b6754d6827bdd2fac291cfe6950d62f9af52f93db395f8cbb263dff361d8a9",
    "0d730612b6ab701aa9a1a3278277180fe5e2051118e71d94b605b06ba00a2bcc",
    "0b1723291429f5f8460e74e7c988721b1568741b7800f4f91f70f15048cee7f4",
    "0124cbc23c65028ce9635e484ccbc3c8c97a39227644e9fb603f7924d795ea59",
    "031598fad214a79cfb7cd19cd53372c2c27ba4f4a0ab018b41c222e2904cc945",
    "0d02c3e7cdac19d32dedfe58150a8b93db0c7d4d4cca36b2e8c84925c12fc043",
    "0d38e10dd0d1c2509529262098c4291219fcf0ddb291143442d61555e4026fe2",
    "0192e0ba68d0164e298b6a32894cd914578f96051ca9ae12899e5174bfd678d6",
    "0c742a9e3fb661f8f7a3f1113f7321206b52c170f56c16a7673ed19aafdf2211",
    "0a6137c74f02b90ac983870ee90cd2870cd32bb8632099a666d7486c21a7f416",
    "05c9f1e76bde020dee91ed77667a85b6c97d9e84b547456de47d00d642c6afa4",
    "0942b4bc4c4ebe8369ffced78783adc03d252b42e4645e84ad077e5af4dfee22",
    "07328b84db5c6c8e7d7f92df0bed6591867a84984dc678e1e4b479c82a1b512b",
    "06a1834987db0064c3d8aa637eeb6d4c3d8d8bf81a8cc1ab5f31bda7eb7af028",
    "025fede35f4680e04ae2ed7f4ccfb8a3d42194675372152f627cdb587b842cac",
    "03204d0cf9c98461e5c18c55e87def42b544e38e70a05269851f1e2627ea63a1",
    "0f48969f91d2a8117b921dcd0a45c395f67ce6fbe7352dc161ba35ecdfb4ed73",
    "0e1f3d49f253eede8c7b7bbfcde3b522edf60ae0f808710a6a5a8ac4e971ecc1",
    "0e87bff1b4c7add62ea22b3ccb1c861d6ace432f51b3cc3c701e051bde0e4164",
    "03aa2401562617e2b16a4ac975a852242ecc1c9354243dff44b8c561b5476f0f",
    "0e63a343ce412eb04ade8f783738a0be15562995a847ffd20dc6dc62b4667e43",
    "0c897f1d3287a43e9d7e69ccbea960c9e1b1f47b578826e2de41282ec485658a",
    "0b22aac1aee409a86bdbb8029c647fe82d2bddecb5883c5f1a9172d181b14820",
    "06b8c65aa0637aad668fa70f6a4df50a1b49cebbe97a1e7629158b1779660166",
    "0d18a641e25ba832eef5b9e782fffae998ee9808d89ae2cfb392c24b33d2006d",
    "0d57e4d7f78a5a8b87182b380051a6a57e1480a196df9e40445f218742e1e71d",
    "052bea453ba7afb0a83d94de3ca9343d0c9f237b7108ef2cf2447096de8eed59",
    "07ea3702848d4b65a5d008f05e6ef47c49144b8615e39c759b99e056e074335f",
    "0b49a2e297270e000fdc987e48b306f9cde92b37e7ddc4f3e81178a9d4ac5101",
    "026a0e34a7682f601c69a0c78c8cc6a323a1e53ed2ad6c5a16db9ee6af1a8be3",
    "09678939a03984b32705d760ffc5d4dba83e95d3d9b784b32ca2ca652fac82a5",
    "06ee3d9a0f30335a34cee52a5b83e58786b2698f405fccdb3f7f77d1387b6753",
    "0c2e93d16f976237b4d2db5eace2d3afe9972f4808d760e4b806c16818717560",
    "03792a33f8a91e9f2f6640dd082470b8f4b3615028cf352ed7821acd6a14e9df",
    "02793cec289878ec29a3c2a9378e0c796891c93339a0a0467813c8e320e46964",
    "013ab4c1fbc1805d3053e77b3d0b5e2f84254003f6c119d65e8cb8c85da40f50",
    "0f44d918d91daedf2f81583e8830155c20318e0daad053e9a2f39eba850b7730",
    "0ba5080e572861ae6fef4aa1dfab08b54f98aeda2d98df8cea0459f14d495d37",
    "00d9c5fc73b9b122170663e961aa617b365106dbb68bd3d4ad570fed3f290a12",
    "0de9ad09276a9b856edfc63f46816fe7854d054971ac3b102b41a30b944c4c93",
    "078d117c07e04446f552c35668aed73a7246ce7422384356fa6799d9bea816ee",
    "0409299c5de8d8f42fe1344bbb88374e4dc9da062b362352d5d8826c41d38631",
    "02468b6eb3ded2a809ac29e08af59309d1f9019b59cd0f5afcea4d476afb14be",
    "0e77efb0b78187db749c660ff7b32c04e2376f98d816b01014fbc07aaf5c3182",
    "0adcc26b52d82bc0f860946c66661e25f77cb4abb479a11c9a9209006aeaac85",
    "02301f5770eada12c42992f4a867c979697a8841d19a43d80be0f73a40254d4d",
    "080ecb611dea6f108c328caa950682273ce22fa232ffbd52f491148ce5240312",
    "0e1ab148d73db74f910893c4f2703f924156fa6c73320b66fccd6ae633603475",
    "0631113e0273319d1bd616feaa5f741022b494744a166687148d95126d4699c0",
    "083eda289eeb56bb7aa62d95bdee0fb15760cce8d792e6f79038e48cd7be98ef",
    "0d8fad0e64b8c50354f5baba5e96073475ece0645cbe08b821d220f2b651270a",
    "0f73e849fa25204f7194612f0a69e8f9a08b78c688e302ed914aff63ea3b4dee",
    "0e5f6103bd56401203e9143cf3a1e6ce09b18ee64175b593377cefa18cc7b612",
    "0a8c0ac4851997a844e311dc1b73c9e97d1d47c70c0906a21fd1312ac663b4e3",
    "060bfe313f65875021c5f27457b9af19150481d1ed1e1b689bfab7bd62e277f6",
    "05e000cb9cec0c3b7e72266a5c3f0f2b52701250dfcf2af50fc6a3146e2c0caf",
    "03e3b960c82d0223a0c7f670db54533f38ba1e944c267ba457726c815f97214d",
    "03a8ac749b649bea45d6d1f863f708137b426cb8c13c982135e2fc8b6a9e8696",
    "05180feffcd325dcfa8f09c7ddb6c3339daefd1052baad17ed659733257ad004",
    "0101f909317719b7c8f57c6be7291c60e6ae451df453448710dd463c59a99f54",
    "008c77c49fca4a5eb4806eb9052b8c83091cd5179e65e3e805371162eb3316a3",
    "0743f7cbc9fe539c210e5c18e1151dda4b222a77a8d760a2354e672305769df4",
    "0bdc53de981044f3d9f4af885ad15a450935bc042a394511cc768e804212513e",
    "0e76331f7b8956773a0bdb7aeb18e83f6045eda22ff682a69575a878b350b073",
    "097b4caa66cfb09f757c9844c92809505cd311f78527b9a14d72f453fcdfc212",
    "0d5ca8ae2eba75f9ad1773309b1caf64f54dd4412da01b48dca2f4d46cea32e2",
    "0b51629328eab94e353a7c70356a4001d98a1f6863a6cf967a7c7447a267a2ab",
    "0d953d8fc99b4c2cf44efc9bc724e0448d56a2ca1bd9e368082ff93a51cc0892",
    "06320ae1814a7947a92d4fed432a2bca1809aa0aa57028183e14c95f8577b3db",
    "07f3c8713b36e680740837678256d8b8e73ada9440a9c3f0c75355b7353a4990",
    "0ff7b2686a43f936ff15c1aa7b26cb23595cc19a3a5c0b26f5d1c41868acb88c",
    "06b4bcd01a1a26d6801c90cdf9696173e1c7a1380eff420bd33e883e46fde754",
    "09bf4d1fb6debc626107266ae1ae7a3693f403cb86e7a51f9e1db1454ced6682",
    "0360fa841fe0df6b2ae23a073f9a7e5bd461cdaf41ac802cfada09bc56a6ffcb",
    "01febcfc0bdb8710fdff8e08cafecd18afa882d4c1b932316697063556d75a1e",
    "0f33852f55adec8bc814cb5c9b89b2ab544f0b701c07a5f333aeae7551fb7ef9",
    "0313c3e486e7b178f93f6ad0f8b7657501a3ecbc50347e672315294d8e6233bc",
    "06e979259a11131e4a47a0fbc4af1141e782f750d098330a0d0e73cab2f41064",
    "0893095d0d68adb3c96d265810acdf004f89121bb9013a90d70b3768d96ee886",
    "0736ac5f05ba972ddea9f571b737e1e2ac40fbafd85483651e79032114454b0b",
    "04182f8c879593105c563c49dc4861632acff60ed5766ec98c105a1a6d0553c3",
    "0f607744c8c9b0a83ab0133bf39c252efc27fa5f1d2e64555b43cc2d3add304c",
    "070d79d131ef30e635b92bec65872dbf5698760505820ea44d453f4bb67eb5b9",
    "012a2cb432f62a31f5dbf3d1031111f67f61ae96e21ac0d2d941ab5753fde639",
    "0ce26b0de4439875089868383f7b4537387ea3880e6d26565830b427d3fcb7ed",
    "0e0969f81212a98d880e4b95ed6ef76a8f6105abf2635e24706c684b89eac877",
    "04980465cac72651c8493c59e2e113976ca2b8727ba0da9d5ded26ecf819c738",
    "0a83a7b2754a9907b6d63217e2648859a1d6f87411b2999d1567e3e6b3e6f2fb",
    "09299215d830e9945b775d699155691c99453a058f1b46dee9ca2cdd1a8e3f9a",
    "047751aae421eb0bf46d3cd0b7c19ba68799d51c85ae9daf39f613a34778a212",
    "042c2f06e17aa252f5b8459483ec17080d2989cba3b2bdbe0409bf0ebb2e3979",
    "044c1c5fe61e3552bcbf2aff3d8c1bbe11767de095d7c7c98accb3cea36ba00c",
    "05a548e972e91019939696a71c4fd09ada723edc5e2127171902c1c53639bd2b",
    "0bf0ef51c7e3717bcc1ecac27d1b4a7d8dc8ccc08c98ed95d8968a6b7173fd85",
    "0e98ddce3369b7ee90c1232395fece5844c04ff26b35c803d30f7ec4bb2b824c",
    "01f8757bc61a1a59388961ee97b4c62cdef81126d30ee1a975f87448c4adcbd6",
    "0096aec991e3a3aab2036bc367369ef55095e69c6ee7a15b375570006bd54358",
    "002da1f3eecf2577a299867582c2712886409b818020fb5528af985f8793cfd9",
    "077b7ea06de9bd0a9b5e00c46c29d07730bcd03f87431f1c54ac9188840cb5f9",
    "0ac105b5fe55500125a6dc2963f578b639eac397afe4c67b7ea49992bfb781a1",
    "0c1ce01724b59623b23d3e987e6ac4c0891ca1006ca1a6d69a412f852ae04923",
    "0cfb074b13254b671f6e6d21f83b3694c9ba05dbd1ad2f9b4ccae6ba6743d9af",
    "053a73e026db2695b69c6b7a2a0bd3ad5298190ad1f148727c1656a5479d0138",
    "08e692841e4cc040ae0a966cbc37900cde6e628a112f1414e52714235ef41329",
    "03a85765b93c800a2e569f0095f8923afcfcc74d9a21c6ab2a6e9a58474d1d1e",
    "0adff1e673de8238517f1d4bcce7ef27474659acbd8de1ef05f2b945b0ea3fc3",
    "07d628c4ab431513bbc9a26bae422f5e0c64b2676a05aee1aaf7a466a1b755a4",
    "07ebeb1afb0a64a2b4dfe949106ccf69e6e9ecf7e1ad5f0e889665a74bb07685",
    "0f032b05a40e3c4e6dc741d2ec5631866b44378f299b659b282d0cf39ff503fd",
    "079c2caa6132492d31c1b286607c5a08487068b4b152aa7eac67c4a2278582dc",
    "05f9ef0303d9b03d72ba9f6223d3e9f0ac5d762ecd6e12778e3159537cdd1f7a",
    "03fbac5b568e00d585af6e20de903cf8ff764ddd365138d7adec59bb49688781",
    "05067f3e0c53c12414b96ae65eec47c5bfe7bc39be4b5d35b024ea87e1326e94",
    "0fc8559599a488eba77f923f1efa7c512f3f9b23a34b862df34c826259c043c0",
    "011f35e269994b47139d7e778698b919bfb989253def5f20f87c0db9f6a4f382",
    "0f7d583e90ff9758aa1e9793c249ab7d62f2ae50fa6a705c07bbadcec2c6ac7e",
    "070ddb12169375f4af6ab71a8f44b09d687898d4a987f4ac69f60b997b508c0a",
    "0216081dd30fb9377775cbdee4efae3f18eb5208e50a440ca0a50cfb9fbcfe19",
    "09c499e3de188092e59f78c723807cdeed83893d26e340331ef480cea4b28213",
    "0ac85e02fbbbb2468ddac00260c58e5bb9e65386493efebd9e33195e542397f9",
    "013ffb766961d42c12dfacec571adc43257e7ac1fee04c1e98b95b73d49ded22",
    "03ad84e23c3ba19069996bbfe645e36de72d4013b4d70b6e099608df421ee725",
    "0b74ced92c87fc4078e1f051c2cad32a62c0fb31b633b665f7a52d2aae52533b",
    "010da9f300ec6d7c4d57d518cde36ae85823f71c729cf9cc2889dc4ff2d04c9b",
    "0a0d0cc4784edf988c38db5a78ab50f4f40a0fde9bbfe056f97260bf30fbf0d4",
    "07d40c9c132fc698fae2570651c27d4d02931110deff6b6b48a730ff1e063e53",
    "09f7412e0cded93a9093e9e67a791815451570086ea0cccb190ec3b83504553d",
    "0a8b56bf9e5c8a9e312838692a459c1b62ffaee21fb44ba3526b9bd79396fc02",
    "0fc0b5d8003f5b228f105c073f52a48133d78860993ca187feeb86d0b07ef074",
    "0b44f5386f30417c48d98c07fbd3419ebc9de25482ea9a8a051f167b66e4fbe3",
    "038af34660363142b3592f4726c387a5cdebec587d8bca961ef89325e5eb8d89",
    "0f421dd9c7da71de40913daa623a7c1d91c103b7679949d31e027ef8b2f4f6ed",
    "00aaa4cbb2dd01cedd8cd78d37aca762bcdda5a51d2955d4c97e3cd3b5e9ca02",
    "0db4a72db4e4239406130c250e140ce6327b7a0b6e54d010c75423742612d1e3",
    "04bb4caa5cbc6a3edb91963a9c5782309cf0029be8722b05aec69f5f152cdc38",
    "06a41435f615c18c0086c7f88100010071c5cba4fc8265b9a5459b2b6423cdda",
    "0ad4b2d455ff95c199b123b1639dc5386fc8334173c135ac111c3eda53edffdc",
    "0df79e10b898c88f0c1cab99404a8872b809e8ba5904055b2aa30510a9739e90",
    "09fd9957f46c5e675a9abc5192536ed7108d8104580d4cbaadf8352d5c3fc424",
    "04464ac4dffac37871e37c08e104a41332a69c417f340471ed0532b1380a3601",
    "06648c9b488c0843a623d0b9be0e11337f302d88666d4b6a9d310c1ede1bd2da",
    "0806f678a39d1b10319b6d84ef472700c0b282ac4eb90ec0f5da5f7a750d508b",
    "0789c09341b7831e91e97b754c4dd34ed404569c04b061843fd8c32e08ee50cf",
    "0266841f5fab2bc5b4db97ef37995bba3da8fa24bb72bc8fedf437b5fafbc8ab",
    "00b534ead4bf039c3c1d2ded9607f73e976bd152d9524e434a70ad94db83b4dc",
    "03ea8f3126c6ba779283b1110d745bd2444075df74be68579eae0e49cced8464",
    "043c479a365e70430bff0b19837b32be4bcb8bbc13475a2d3739e1bb665c89b7",
    "0df99f202c0c013d70f342930941d1e3886ed7043f20036ca62d1bf30de1e819",
    "03ca6fa9059d7ae0f74033c5ff2aad5a15dd71d24c51303f5d98c5108c43b741",
    "0242615eb7895d9c27f0dac08a44bc34e824f4bc77b841296aa75ab736c98df7",
    "00a7a701d997de03666d90ef06035d55be93e3192140d613b3ae38de74fadd18",
    "092629c7e016a28275734f5553cc68e79828efc654880b469562ea08c952c8b0",
    "099c3b14e311695ab1330f55532ebecc89c211b66efe4518a97d230e5f6f9a73",
    "030d3d897239d71044032869932019589c67c88f594631dcdad0f190b1725165",
    "054f869cf4c1e66240f094fa2aee10fedde98137e035bb1830c04ee777b4cf26",
    "0468e999be5582305081aa7ab1a6e1e1033fd505b120664772be4255ea17ec08",
    "0a108b7bd50673394b96384d1c95125e6f5b925d967f64dc673429735fa18966",
    "0b0ca8ad7d2f3f8712589c718af3780ef36d4080ce57969a8b75793b8c5778de",
    "0f3c6fe353ecaa8987082ec7288047a6bf0a59acbe76952dfa75cafcc045272c",
    "0e580b006ede57c1c894d65461390cdb2b151799d1ea167f5f4bf3153dfed0d9",
    "0fe2c24d78c6243db015f04d8c21da7127cf8e7f572ff6b2f7c3e5b54794a500",
    "0f66cdfd4884debfab5b9ef12a823c1215b13394b7fc4290f247284771b5f6f0",
    "05ef0b1d73b9555e4329b3d93c5f258af68c02ecb8d7427b22156671f604613c",
    "0f784d01532c7d49bcaffd1a057443887339854f0c4ad312ae18321139f0d845",
    "0bb60916006d94a6456c4b97479c09b3f476b53e5a4a39af4141cedfcff15687",
    "053f993ea1748f2628a87b25f77810df3305e71989ac957bf2e19f1b5c5f5712",
    "0ac90406a40b931601b21c785523a1f0f945dca5f621419922d9600440795d36",
    "0991976b84571d4acff3fba55d58ba0a71c1360211f9b7ffed70cb3f79aac132",
    "03c28a3f93cb566c1dafd1fbbc4b34c1fd3c3116152ffe5b1a72e71260ca5ee8",
    "009723caa758a3050e82d5f6c4bf3f46f03336347432e883105f42bdc2195ef8",
    "0dd0735f671f73db44def49ea366a7508d5daffdc6b7b19af4be8903f1a09554",
    "09a2bccef949352e6255552749487e255966f3c0bb1693320057b69d9aad8443",
    "0427796dd5e4c4190bb8c5874e1069d836b68866875bb518e3555ced0ba3935d",
    "0cae51c3918df68e4c8d5a1041fd45086a49e251b26573442098184ea62acf1e",
    "0e43e87135ad31e654f6157c3f6ca9c3e1eb9c493c40b6623964a8f641a8ed2a",
    "0df1e179f2432954c8b47dc6e7301f84204a07e19751eed51ac5c3db7db724cb",
    "0d19ee1c67c0c914296655e721437fe72c675295df80bb69a430f3577917946e",
    "039743f2b2cb3f989543e32ee38c514d948f8a3b83e0e6378de15db3c26e9854",
    "014ce9999a7fb4eba7cb0e9375a996d2b044d00932509d357cc8c1071879ea64",
    "01f710523f24a60b242d3e1b46f756de2603f5f16571bccea154277a7cad3549",
    "06313e7736dbd3c1326f5a81ab1320cf2024edbb4a94f514da79ed5f3ad3cb70",
    "0c430422051d3bb19eca2348ce9e9c245cffd08dfc6e15733247dfe36096b027",
    "09ba145c86d5896ba542059952933eab595ee58163b2fcbb810de593ff5c2412",
    "0bfde4ecd63312ff39c159a1dfc69346ad3acf36b15bdca19792437ae4439eaf",
    "0be16b9b7d2ca08901332ddf79b2817821672e1d2e9ccab4270b41beb8c052af",
    "00a15e337ef5e9b18e7d2c47be43851f3f1c88dd315e5d8c89939ed6210b1fa9",
    "0c8281d68dff94a499ca81eebe759ffb7a345e3b364e7cae6987d566f2e53891",
    "08217283f9b491a0cacc095f7e91cd6a848098b7429d3136f7a5f333f040efb1",
    "04e8d4bb71ce0933ea6d0638af2eb84069f38f7f6e4626d838139af001f2ab86",
    "0d15fc39ff367f7cdec37dfe5bf0165245c27879761ff2696c969a46640232ca",
    "026f2bff36ccf6d43348bb1fb6531de9647177f4f56a7b44ec169d143dcca86c",
    "01d40f0f1b6917799ceac145265b3a59ae21077d1cfc468c4413a16dc46e6926",
    "05591fa78fac80a2e0aa5e72dc8cc153d77bc3c1cc8a55749c9ca3caf3a2ef8e",
    "0bc6ab4b9c77c3d1259655458399e833c339f1de72735eb8d20f1f68691142af",
    "051baf64a0ce6757af1fb33226c9cb0fcd85efbbd0ba878fe2a65d216077b273",
    "06c4a49964096026f8f296d40e34748e731d4f2791cd9a043cc054b3d56c616d",
    "019d80bbf19842eae819b0586dc669d1fc220e25316ff26cee216449f02ebc70",
    "0608230aaebc8d82c44239e102f8498b9f520d0952428f040383199314cecdaa",
    "00111d48bae480ae8043f0be00611197269928d5ee17aaa6427191a886a8c7a0",
    "0cb4c61034829eb85eb195ce83819c9bbc0d4a853c6dd64366d330e336f6d310",
    "02323f885381e95d2ffb85cc1dd38015c01021e6f4ff393509e96d3b9e445950",
    "0534eae9305e0146b42858536dca02d5ff644dc7f67d87cfd3eab5f1e636687d",
    "0b2a89a8f1f611e8a9b38ab8f9bd9a64874548c81bbbdd3f9659a5d0a3d9a74d",
    "08b2bc7e9b5e855fe9797d34e63317d9f4564ec57d3e76d7ef3a04856a9d1ac2",
    "0ba9a46ea5eec5933353b27a1db7fbdd7384f17ed849de5a0cc69dc780b9dbce",
    "019a3d2bed9b427c35a0807588fdeec9e4edacca118afc0413bf1a583a6aebda",
    "06bc3ff8008f01b1ba561c674ae126ed6433c5da90b90c9aa3bb057d6d1279cb",
    "05205c4bd59bd5a2f5d34def46bce248ec9e091618ada26ad1991161d636b3d0",
    "05420919f2a8bf624e91f310a6232eea45dd655d23da4d185dd52b1406b81e6e",
    "0cc31a13a649dc1b298733f8cf29a91895a8050bf457e1a0ffb997f62c29c027",
    "017470e607279fddf0a34dc3e06a58770bbfa928ea9ed6cded431eb51772f51b",
    "05b184c8fc5733f96729e8001a32261f1844f94073909b5e1f55eb4ecc72c8b7",
    "0a80a7b336ddab9b4ae021ae7bae37e17ba8d1ebd9b84cfe461379119d7edb3f",
    "0bfd87f624692121fa6c582b3025356407c69585b9859135625cbe8c776318e4",
    "0236bfb42ea8ddf6f404fcbe0c61cb031249323680f3bc81cc44aa3367e3e03f",
    "0460a838e73827e9133d0ea82b06c02bc45e80a5acb8519a9f3e407c33a0347e",
    "0c8e80abded7b0094f851beb0b82561f4a389e3997bd1d72345fa8b6a7c0a8a9",
    "08d247bc71f31daa4a1484657f38e68554cebea7ff055688d2bda2dbc159bdac",
    "02c40106cb5fe53638e3c591b8baa5fc262ed5fc03016581039316c7b4026a10",
    "0a559cb0083c978c1a6a02821a40b372d3df555fdc7ee27e7b3e7876fb788ec6",
    "05c5ced031d4768510265c4317483a74d9b05237f8afd19f48c9bd7a8697bbff",
    "07b7ad12b11ed6084383d0c95e20a93d35439fb83d2b68a47137d2e6122b928c",
    "063d0570d9b461b7a95086c833c0e25494e6cbbaae1381251208045bba7b74c4",
    "0cffe54cf56335cf9be8e4d0955f76ea739a2297f77a72f476fd7bd3034ec800",
    "00aa97175ef45616ac268ddf62208793c66d12f88d594341456c83383f0ca7c3",
    "0e91b55fb2dd8bb09c1f7c5e81a156f8d0454bb3bb8223a2ba8a8732a2030def",
    "06f5e68a55999aa740560dd650c45a131907c6b52baf33ae4bf0782765b943e1",
    "02842319b2faa5ea5dfe4735dd014836493476b478cca9bcd11ab01c04c6df9b",
    "026f70ed2ac0d39c809ddb1304821076ef2b20028283ab0f574ace1b22affc8f",
    "0643d8bf08911dda5a53b2157c6aee24748b733585a4a2eaad2157963638e6dc",
    "04ae442c6b7df1c20cb0f29eabafa1743ea6cda24d072a702642180e5eefa47c",
    "054f343ccf82cf98d09c03309e240f0b7ad5697499cf6f0e6ab29c005685e429",
    "0b95901a67405737f50eb2ea0c013fb9ee27ad781c46d0885646e48dc571ff15",
    "02cba9c3c9893895522a93d30ed3cad45652b8a1e941183ce140395a03f099af",
    "0c3a3395c377f250b6b1bf15cdbe10652d410f0ada2219cb3b7b184235a033ac",
    "0376d2069915314566bfdd4b121eaf27dcf80e888de3e870c2bc38a41ea7d971",
    "0f1d8983ac3550216a0ccb7b41dc97f8cc49703297e52163154c534e4950fea0",
    "0299b9c3b543440ce1c337d440613df3ba045865368ae3973c946238932f8a7b",
    "05ef9a43a062d5182d315b286bf881a1ef89dfce2aa61872aed1c68c56fde83a",
    "02a33697d1370af2c0a72fff3f99dedf31eef525f4d2038f77f8e3176fb1f7ec",
    "0c343d464e8cbbf14bc4c36e1e83b62beebe767020d5ac47251fd7f7d670d385",
    "08c508e89d3ceb2b75967481111394bf7aa887efc1e6c1d15015d9899014bd43",
    "0862db58a1b07143681b8bc464595faef2d5be076c89113808922dc21645eaf9",
    "0586e6ec6cea0558cdb5377fe2878b92d9d8263c882033fa63189e3331eac241",
    "0d73275c50bb8ea2f80e3040c18f24ccd4adecc28ff62e176a4b108ff748a2b6",
    "0deea7f53d39c2b33b860df4dfc9c908e3a0a54165e46fee825d507f8c088100",
    "0ada9a024e2c8f5bacb2a25880927280fc2ef2a6500683131639ecb60bbd5f0f",
    "0a1f84859fcbb9cf3c6291a61f0d4a3f889d7625fe1107e9c471564a4234bf3d",
    "075e5e73e27551e4f3720e19dfa4a55c5485badc6618cfd66f8a6317e1059d25",
    "05b205e31935fd87f0f34adcc346b97b8c3095160f63c9affbba063b4f81727e",
    "0745ed88c3d6be94383d160ffdbee3691119ffbbdba3a275908fa352e38969ab",
    "07cb5e22f0eb32d0f7063759a6304f22475f5b8fdaa5a2ac43530c95760f3190",
    "0b0a89a21f3fb74c91a8e6d94c19650af166207eb35308782d2b26265f2317b9",
    "0255bf4c0f2672b8e594813965afa66c913d54bc07b01537980d9d8f7c010d7c",
    "010906307d9e14e8bba9f54d83afc6f311f362e62b488f3ed1eaf3fb1f269b52",
    "0fc5b85e3ee80c0423652198722bc764dd850399491593c5c781217e848c4cfb",
    "0f6983bce7fe3019e88119fc2b96feb5622d7bf89dc4435a969f5b849bc54667",
    "05f9ed52b195fe8534712bf04efc251d80849ee060a78d8b6999f28d311eb9d9",
    "0a25db2c7494c5dbd5179cab5f838eb6a2c3369ecd30e7f917683c45ac06187d",
    "0fabd254a2857b34f98580a63fde1d15d4e93c7e9b9cfdbbc6909bcf9b006eba",
    "09c67df61ef2704aacd73ad432a17f13ad4bedca4494c88c7b5d99741628c8ab",
    "09f109ba6370db19aae14ff24b625a76e6f681bb729c1b11d9253550538378f5",
    "01aab085543ddfa621145594b7791d9a2b0deaca1f41149e34967988612e9dc7",
    "0c2dbaf92127f60682527c94043338d91af83d5d34f8a3a86bc83c01b15e5c82",
    "07bfefa3b389455b7573000f8eb53a5b4c012025dc38f3ed89f971554f38011c",
    "06561812dfe3179a0dd4af1d9bd1e1120cb5d4fe4b8f08bfda94db31e959fa11",
    "01288bf95d2e98079e10a12be0d549b86d0fb1e9c407eb1227cfa5823294b648",
    "0d35f9b77af48ed53355a99691e3541cbd0a77e694ca84832da317149854ea75",
    "0bdeae21080cf2388d09fd3090d70f11d04e3d7bc8eeb016852d98f4a27c0459",
    "0d53711dfd6fa40212c4d068af0f5a99e32dd2c81713b14b50072a747fd7b2d7",
    "0ed89689f6a63bcf293041f31d4a68450d505193c726c12b48d97d96e2293d0c",
    "0b6ad5cf3b4ad7ec173d0b244d3172093295e1f30fca757a1739caef4c9f5064",
    "05af128c48bb446e8722bba33a5762639d0af26b2647cbf2bacfcbab325640e1",
    "0c5f9c2cd7846f0f1e3fd6f3cb2e595358090680c2684200548f937c8adafe34",
    "0ed0661dbb065f083108af2a1c4b2a53b166e14164a358ab1623da1b0be2e8f8",
    "04fd7213b0032ed9018dc29dc7508f096d602421210fbda5c37b8816f45533b5",
    "0f5edecc84b09c468c75c29eb0512c01d68e60338c9a90afdc665e330d2984cf",
    "00afa2af58612762e46d7b8eb4639846c99020c62d34f7d6861bd99373c48ea3",
    "02aee69112082764d7c18675de7a94715b04a3c4d6e8b533097b41cfc1d63ab4",
    "06e2bfa6f85ff53cfdecc775ed92d6eb9b11303dd93dd59ff6df78050aa2a233",
    "05b3d76b90bd4380810075f27d686ddb524ec288c0a32626d31cab130311c79c",
    "0fb41e769c24881fa7d5c175074604ebb4c941fecfee20d13e1126ea20dc60f0",
    "080038ad20d14547fcd0d3ed4f6babe0e7b45957c5b3907a6ab32ae9083144a3",
    "005b7caba7083614646a891335701d0c26776febe3ebe9991482681c89801cec",
    "07622ce145d01085f9f94850dc14dc23ad07063800a076b984441a89604d7cc2",
    "01049bd6f5312fbe660d535b99a2af43d073d62109405a7495f68df12db5b23d",
    "0538b3fda6071dba3ed1cf200ba046f02214044e75c6e31a0318baa2ad964878",
    "0deb3697f39df7c6eb4babd4a9e0676627918507e7ad93074640237ca14c8f8d",
    "051350651725160886d6905057364d2352d8751f8e6c6035264c833fa4ddcc14",
    "095363347570b134e957d6fe961af506901ae53ec1dd7364833d336d51cd2b0d",
    "0d5dda3554725748ba1564d811ff0d206f141a522bf9475788a5d76e3b9bce6d",
    "0f6a0285fac7b3c845028323b90764e96f5bee254bab227557c30dee12acea34",
    "034a3bee6f6ad04f3df164652434b3ca287847f0c0834f375b22e2bab158dee2",
    "0d4f8a35f5de79a8de78425f27b59543e6bcc3cc7264588ed2aa668098350e1e",
    "0b2def2d66d575fee9ad35099eaa6ca6b0e1822b177aa833efc978630b6d301a",
    "0683a4bb70d299d319b42308680664fa58e00c62427ca19060f1d300c964011b",
    "04eca8c892f36c940d7528223bfbd126d959c5e603a16b68cb31dc55342a8670",
    "0511cbc4c06e517a4eb6ac72ad63d2f69279fe549abdbaa7c61c2334eaeaa237",
    "0025ffba83320ebbf16bb3ed1860f4c8b35ce8ab606ce06db748f4d9b22dce3d",
    "0b7ef17c6bb7dbda948f5560fd43369d82505fd7eb84ae8db62ffe3b50edc0d3",
    "08c651946f51edef4f4b5c10f44277df850dfbbd09bf790d0e9a372c286ad2a4",
    "05e798b7354bdd421a2d9d1fb7326e2ca7403bab8c838053dc923e51909e8430",
    "0b71b9d0cf53e773c0133ff2e800427dca21651c83109337821984ebf7bf35c3",
    "0f7c13f5d39b1a19eec800564f162675737dfc91bce2dcf2039033b3c4a32159",
    "06680cd7ed28a9100d146f1cfec01bb29ce0f0128b33ec5ea7f5563b3654b6a8",
    "06eb5596d713f6e02e66d3ed42825812a0dc5222973e60a46c970f046f8b1884",
    "0b2efe667507043ce79c4c1f67448945d92843bbe8e5f40b8c362d977c259c21",
    "04b37cb24f9c04aa7f3f80354016286288431eddb867c48e527c55c5230bf81c",
    "05828806178ea5a0f1d33810cc53154360b8021bb78d4acb621bc1e6eb5e8782",
    "0e51318f3832b3a0b4f052920aa126ba7b5e60de393b9aa985781067ab623a2b",
    "0c6eea5f92e9cc0578af129017a961c0d2e688046f24bbc46b8ae9186c382b2d",
    "0e7db8f184f3674dbc2160939b2b41c1663a1a8fc3a655297656d0a1dd573b01",
    "0eec7b30f239fb605561e46c0c9f62328c6f2862dda332f4f4d4394e47224f7b",
    "0113e0eb5ad394844a096cdfca2f1ec19f62cf9800f857d0219aefe7d35c9864",
    "00a43a64b5d459e8314994e142666412e5e1cbdb085cac56e8dd377c6fb8d710",
    "0e00fa12bc6604f397164299879524ad7ea174b265f98c940835476ae1a6184a",
    "039fb4a0d877b7c3992fe170ceb7381a2fd24a9745ac89ed25bcfa93fda2fab4",
    "0d24d2385f3b412241726300be41c531af3395ee7c5fba43c4ce3e7f5533c2d0",
    "07f98453b22cadd7d0e58fa5a0b6235a23d59c3727ccdf12661a327964a818f6",
    "0b6e861f8ee90b51c083b7bdf560113906eaf28c2ce3beca9dcdf6d279629e1f",
    "0b8ff6039367be363d9ea3c796f3617750a0d5c5e298f59a01f1b1f7d101772e",
    "085c80b1acc2348f61cdc55eac824272f321e9fdb8fd5e825c1f01df5b5a8987",
    "0fccc26a2c2fc695f4bf237eee690607c9c95e44965b71af9c26d2a607be5315",
    "04bd31f86f73c993a350d56d4ca89f0bc0d169cd92e6329010f0ce39ca81a9d3",
    "0546706baa221705cd80a9b59a0d8f07829f452bc1fab98b02b55f98acff6d72",
    "0b15421c9c7e2ec5859d7c2516e6d2fa35bd3ed8df44bc7c5278578cba197f44",
    "0ce9c5593c5c41190141d08939a6498ef1d10397cc58a217623ca0ca0ea4c0f2",
    "073c04c20cad7f43780555535624b1b6b9a98f3ba0550fbef5ba4efbefb17b84",
    "0e983b458176836d53102fe8afc6de526bc083457d8ebd5589f49866bd835f2b",
    "06277e4fdf4a7f0d039d599915b2134099e5f4b32976293435595a57734bfda5",
    "0b62ff43a7ae3572be96c68e84d7956c658a8a7511178f5f91848d4c5898f825",
    "01c38a3072ff948b8f0d15f1be1df5cde656c50065b64e4144f291777fe593cf",
    "08266447dc55b59644314246e6d8e6127b3ac0d3c0331818b833a5f518bc0e70",
    "06b9fd4cd157a17480cee19f1323263856734c44244e2457cd2baf3e71ea4649",
    "0dc62b0092a34c603328bbfec44e142ea7e6514c558d15aecbd647488a4175d0",
    "06a3ad24798bd389b5d558de1a89a974527f4ee436d4bb003b10de8737430897",
    "07e4eac02b39251e75d6ec65ded22893e4fbf629793e60aed19caa11f3d0a814",
    "0652fcd11612cd729e2f643b0bf9906c13268d4bb30f52a00cf402e0d8f5ab42",
    "01a2d07099e9b2e0eb3b47caf7d90330ddbb485f034102fc70db396a0b7b2f26",
    "04b587fc6a6bc9d53a10e243b51b6347a2d33f60eed71208ff49298b2e267451",
    "0403b18fa9dea2f23e4ce074ee03ba5419b61173396d090a7ac11cbcc1ba9118",
    "0291589c3888d0779fe06958409d2d0dfcfdae374fdfba65d0cf40e0976319af",
    "0f267d2bfb09e2fed855ae8433adf8ad3400b80b9789334f363dee445ea92f1d",
    "0aebb46c307d8c3a7c9cb23fa08d9fd644440a2db34cba990ccfec9c26a37c45",
    "089a558648e21e4e7472fcddceb3574be12aa1dec0bd7c0369eaec48e3b9836c",
    "06b470ede4230fd4e4c4c0b86b7ccb006dd59bd327f396f6d2e95643eb9c61b2",
    "005ad90902a938a433de1e1e5be265cb95dbf985fa5f150dad6fc0e084f068dd",
    "0874a09a3581b207a698f45eddff2204f4bc68f1bf577b15f56a93373a72e7c8",
    "035f61eafa0f6e7590416f37aa7830e143091f49b78b6727a54f3be5c36c27b8",
    "079af734eaee16c16cba6c3d85393e234ed8aa6e4a2e3ddbc53b04945644aabf",
    "038772558e717b047fd8bc61110644d81e222d038ae7bd0a07e86b2e40ed6c34",
    "0efa6e5b89785fdc70153f903c4fa735aca805ee952ba207e6ce247d96c0e656",
    "0ceedd8e326a85e323a1590e1f3a8901bfe3718c4abb4bd936b923875375d110",
    "0e701ffb1be2ed201bc5d30cbbed4d085394974ddc9be7d98f44e99bd04a7f12",
    "0b05b811110e33ffd87ea8e4a626299170cb4ab0562dbc6dbe565d8692582614",
    "0c0e2a56cfdfa4986f43a8c22810f6132fb700dfa36c1b75f370b6cbd5c16205",
    "03dfd1a2fd7cd3473d69c42aa80d2f5a32888489f4b07d2d2e715c59da693e40",
    "09b91e9cb2b9c5a12a17a7e96766fd110f762ac5bd1c567c6e499bcf975561e4",
    "0e559179f477f7eadda3707e9a45824ba03706557e2df0b47dfc66ae122eacaa",
    "0a309ed8196d2b4a58a68b5b8ee5dbdb7921e8fdea442bf6ea19cf186c7c75d0",
    "03a170957a8ee8266f212781f61e9b6b0cd2963a324aa9562aa2668f8803eed9",
    "047f2648d5779ec422cbb854ed5f288092909c6928a20d7a452754e831974ddc",
    "0985c74336a0acbd29d15d98c7b0bcd0c37c66a8206b7b4b6d9059f20e442df9",
    "04a5f74ab385567fb4f11bc4a71350dfd4185e50b016c1331d7d6f70e166564c",
    "0856bea2dcce7962b0c86deb8d32c31292f5e9332c26613520577cc503a59544",
    "031f3d552356e68e6a9c4d7258616e6fbe9d42547e05d4aa56edbb2b75d30b51",
    "04160f5d479c115d0927fd058ad5182e104107c244c0aec68d034480fa917e8d",
    "065513be4d14d4b2bfe88710fad5096358959230f978e9630772d746e02081f3",
    "04a2823460b876db76761f232132ab32da6fa21f93da5361aa095073904d6c58",
    "0772b187e47ac0d71eb330398633ceb763175d4ace7ce04d6e0cfdaadf916d12",
    "07c785a5b43157a952ccb84ae94a27d0a5488c0aef8399ee77d0c373ac7092e2",
    "0c92dd8857b2cac75674ac936cbb23168a05aca93643b8e53e60f2dc376dc129",
    "006ee226be2236e14d3c28d2fed6519b929bbdcb5a4381ec2a6fabe417a2e402",
    "0d71940d5c21879ba73cae8f0f2e88c9ba3c71d190f8991e94db4df763629115",
    "0cf526caae874aeeb2d8ecf47cbd56851a6e9b838f506df0fd66bf1b09ff8dac",
    "0e9c0dfe9d1c4f3439c196fee3310d2ef4a942adb3ab5c7a383040b0baf6299f",
    "00b2e4e78ca87068cd34cd3b11d411a9a53ae03547c7659ed11e48be8acf6a2b",
    "04fe9c17239365b5b2c7c686cdc9d71d166e82e88df2c1aff3084c1286bc39d7",
    "09563ef0696e9b3ac7827e73bc89041f2038f68fac7e7b0d02a98dfbbfd65a5a",
    "0725cd024b6ebd0ab7d5a4e574545984f694bfd8e05427ae67139f5c67a4549c",
    "09335f701333e0ea9feafc748001a147773b7feeecdb864a90402cf7ce57701d",
    "08daf9471a75bcb66df83cc239158ed79ea9de249c96c6b5bd66a42aa9db069c",
    "002e69bf0f539e97f97b9cc51b925a7f018c2417fc853b73e7a0e74cd146fc38",
    "0feabc784bd4642999ce8e14447b66813b75ce42a73782aa5505975e53054a11",
    "0e1e3a12daad589adc52791735c15ccad05b4a427810546a00a8affd092f6354",
    "0310ff7c447bf743a587c90e0f32d7b956e6129d8380bc67caaa8029be93323d",
    "0145882f300e8ac7d481f0166c704c37914832f4f02dfefb94c409b024e8962a",
    "09aa305a7aa38f143ea7b1b2a47f6df823b3c8c6570a4a19ff87e538761e6041",
    "0ca17c28ec642e19439773ba4f2ccd66be678e5bc58c16e2579d6213a5ce30c0",
    "0d68a57feb3c65be7194c6bc61bc49b8572858d966e8f0196c7087f80799a012",
    "0c670ab2dd2e7c1fd78704d2a95538ab96c578c2a887f52441d5e663e8be7cc5",
    "06b574bd1e5a266b4b826db4f1b45cda14c41d405812869b10f1fc3c2608752d",
    "071cb68c5553a05ed175c5d1fb4d6d261a87b6eb009b403cd0aeb731b90ea4be",
    "040b7482796338c4f9450d3d014052dabdd0f1923c8f7ddd8449a3f3ebdfe6fa",
    "0d7b87b8990222fb4de787ad2119689fab501826a8f20871a28690a8b8b29cf2",
    "077f6fde6fa809c6ad6252363262298d05ba82ed5ce22c18eed6f9f93e2d0817",
    "01c7520a3b7c272918f64afa03acecf65ad3a8f884f63bd2d426da323a51978c",
    "0fe62c29a3f622f822846ea246d24824dfc54cccab5bcb8ac030de7be6bb9dad",
    "0613aa90f19c0f5f876be2e9de7d8222005407228c57f0cce92d5611f451d6f9",
    "09ba4e8139d151a6c618181b17ecd88509a589b524edd88ea733400d0bb0300b",
    "0ccb1584a1a0341c51cb7fb0fd23e79f5231d94c10365cf44a06a453fb25c167",
    "0731c02f7564e4db2c649179b817e2d0c74daab98871b5806e3f0a026f153bec",
    "07067fb5f192a5221ef0c8668f7ef676c276fa8bcf2f11ca810b8a6e6e435ffd",
    "03eff808707e1cd4b300bc8aeadf96d32c96835f5f5d4b9a76f70dd29ebf49a9",
    "0947547b44761747eb374a55a65bb802cd2371631936931cd3efffcdfd617774",
    "0c80cc0b6b24e9e3e773e31e60b80da3e38e9930d348cb6eaf97b17c7045c37a",
    "0b3dd3dc64c00385304e534bd67f895711c136c13f162774d9b94b0458ded6f2",
    "0177d21380af3b777e6e24a1b031c87803206b1b97359f97f9b5de6ec7076abf",
    "08473780b4a0db412632a97b534ac32c2aa6c6308969bbb3208d60a559d3173d",
    "078010791c83c1a182803395f1944334066e91f651d11a0c5ccf0fa86f5813d1",
    "09a05d68cc87c5b040f47e630e9f424c1ffbcc2462590abddf5ca6b47b1e432f",
    "0d2720f6e0ab751b20c8944d3f1d57a139ce2e4728294985f94db7e92ce4203b",
    "05f7fe308b043f1c7a6f56ffd3105a2d9645aa1abbe24f6e0cb3d6c157973078",
    "0767772257767303d2f9d531f2f2cc1b4938c22967f1dd0f221afa5925fe0957",
    "08e134f1c37d37206c36742074099158770d73da3f0cd6cf52a0037131327cc1",
    "05794d0e6daf82e532827b14984ff58c472053fe3f950c71843ce69fd41d7cbd",
    "075aca1236e74b738ce20b82f508cb113a3d19624f70da4a0ba38dec1cc4350f",
    "0ebdc14c328fd92c9a451156c6a3e24a4054b5b99c4312dc5fef1dda2f1552a9",
    "02fe27a6b4bf78a338c54eaa01e3f9ee2ad29483e681e79a9d81bb98f7ffe447",
    "0d8601e65c889843a68eebebac3876606c7372be33e54b6b51b423cc8e74adf0",
    "05671cad606aed4bc04c72d0faa572d0dd85ab70dcce8cb2feaa504f0054e71e",
    "0ab3cc4b979f15e1fc5e34fedb0d988de0485076b57a2ca0fc123fcaeccb616c",
    "06b839c9cb66d8a398e84d2332c9b7ce09fe211c9d99ce6430e4dab36b0cd2eb",
    "0d667bf772f7459d0bfb64bbb83315fd4e95e4b0444a4d583004e44327914531",
    "06a20a57e56829a88f35f5ea1a77fa7aeee706c305f70a0ab1187e4aeba493bb",
    "0e14ae03f65dabd22864683a7320ab56d365268cbd077f58f969796daf91c01d",
    "068da0aee5ac8a86860e79ee9ca3556e4c68c55fdc4b4a22a8de5b3c9ada3bea",
    "010905a49d452af0e1199d666b6b8cbdd6e9b5d60b737fd17d352e1b9d1c1897",
    "00592db529c2d76f802c30a2bc6fcf47549b1be241166618e6e189242592e3c4",
    "0095e08f20886596ebb0c601d56bd3b8d5643df1fceb46ee20c2152e49e5d209",
    "03ec3affbcb0a24af6c85949b0120ad32944aba977b34874f59ba2ad80e16d42",
    "00cdaf296115de1969eff4d013bcaa87a34e924a8c22cb5f6c1804af886bb093",
    "0d293bd2aa853518b6bea7ded7e5f8ca8f4bc7ef6e8fb598f4d1f5e47edee198",
    "0e6079bf61df41d8749969d708cee236798819f621df0527a4195e8b7f77959b",
    "00e6778d3c9d7921946908130ee84875ef4aeb9c402d35963786680a859d78f0",
    "0a7390c8649b6c4b3741196bf9cab3f7e9ec5ab63e6e2ac15c63eadb0904e8a4",
    "01d78e0729eb359a7969dbb57f47da8351630a87339b88cbf33c863fe902bfeb",
    "01b76e54e798c3be55657939645405436df0e6794458033fb237d7ba4520b496",
    "086df9094bf32453fe3d82f9819d9b665f6d3710d1121fc65a9c7031355e5206",
    "0ef7dc2cd02d93aa1e5c53a2edd81d131d9827df77ae19b5e9a96c862087379b",
    "025026ab930f38fb9d0c34ed1dfe5c28e584c2ecc15ec011fcb61190787936cb",
    "04f9a9654dae144f0b2f25e28e9facc008a10bbab52d4a3db680d6622740a134",
    "06eb72e160da15e9dd07858380c6823d4269e3c59c1b98522e626c100d49bc12",
    "0f8bd70f74558f6e6324923e20dce720a69d1ea2d7aca4b30e21b54de2aaa2c6",
    "059b16053fd419fc59f6ca4590f7d843667fadd03e8f4b62962282fd0e25e9fc",
    "03a9eb48d38675d0a1058d236e0f2beb1848777c8ebaf9665fd6596fd68c467f",
    "0dc70e66c71fe3e0e6b524deeb8390515573d91d8e1745729f2d825cf9e07ff4",
    "0a213b3e63cda1ec2c517a42fb7344a4ad344f6ee2d053b51f78605c35ba983d",
    "067b0e31a140bd8ec846ede8e75d88b716a66d02e9da759df6ca9bfc256e7e02",
    "0c2c94859365e739836d99b3cfdafafc662b539445eec8291e3345703b4721cf",
    "0486bc07cbc83834107d6e1d16f93fc05c618f0c836cf9732f90f02d0e9bc8af",
    "0ea9a690e8dfdf6db05fa348e4cb75ce631d61e3c854fdaeb1019d08711879ef",
    "0a5d4f2a8d0868c5cfafb738a86dd8e427a660bf9beeef36fae6755be4aae11b",
    "0dbad3d3a6f835162d702d7457260f61d1190c4ec6e5709b7b8ae1c196bd58c7",
    "022e3d52936ba3ecdfbe4a89742e45a5f7283e319f09a4ebc31eb1525e1b0c12",
    "07e115b45b3e1e4428d2ac5207875c0f5105c43a7b01fa45578c8021063b3b62",
    "0e44c018faa8f9133ca5f13001ae0506f4cef76ccc80b3765a34b371fe93450f",
    "008d671dd1b9d538be9f4c33e2fb1a22ea7b786479963dc963a6436c24c3be1f",
    "07c8de03f515a607448ecd8a239c3c4912d8c6b4e1292543e7a44a349b420b45",
    "09493ec61b88ff7c57a06ec95a7fbc89b5274ba7fa2cb4cc029a44f00168c559",
    "0b596a5a20384dc1c60fcbc4fc01d5f528b6377412a594eb895996f35ea2d51b",
    "076256ea5df36e2b39ff5b982385496dddb86b12991a67bac97ade63c0a5cb02",
    "0783c70687670c807dd0abdb53883b44ded7e962503bb825a3b1d2e130c6924b",
    "0921840b97d6a4224fed6189d8ec6996e189bd41146c7ad4baaa21a612b7c6f0",
    "0c673ce1cfe849532bdd9ab8994f634324d54e18c87e1b87647e488c4b866bb7",
    "0c2d450dac86a74059a910992ad069f05cf26524b9b1d200d52df360988b6eaa",
    "0855fa84804c9f8020e419d1e975fb77159508dd2a3cd1ca234b07c6c03f5f1c",
    "0a5e48caa6e62aeb7528de2a51fd09ecf4b8a5ec0f8a74d27fe4193bfe6f88ad",
    "03109058fa5f8922fa8e6d9754e0c97bef114067a66272b31273e2b1f1c67f75",
    "01f35ae76870c076ca5ff6c1a61d34365c533a2bc38d796d951855e6e42b0205",
    "060808266d12e6022c89a215414fcb8111e51e76f46a1006f6d3f67c26d3bc17",
    "07263087d1b700ce21c1f61ae32ff6fe1829a4e257b476b91da8d5914fea7dab",
    "03c5d1fb62f0e525a5233a168463c0710de289a15f728ffd7e164763b77f5586",
)

MDS_ENTRIES = (
    (
        "0a3fb7a5bdfb894a250093e8777f2e8cfc43ecfcb60a231b6c48dcdcdf99823e",
        "03183fdfaf01048bf1dff54b63654e84901f6ab8807b4e89ff38888b3fc52d7d",
        "0a870ba3adcf43c82c30297883e11a0cfffd0b8c7b45cb0bdee15c3c97e63b3d",
        "0911bf503265b844485698c6eb0f221e966eba8798f7bee601f947cb8799b4ed",
        "0d0b3d60c229e449f73fc8f61a11f2d0e33f01f520529ca4149e8057a2a16f33",
        "0ffb066296267aaf3a671e580feca1106dfc20841c432c07e899be563c14093d",
    ),
    (
        "001a0d2c08a890db3d9606d816ccc0ed34439f83b4355116014ede673c2c63cb",
        "0486c90b80fd963487c5c092e95de25d4eeb5561fa76b76d1f50aaa9e56564d0",
        "039a85d5e0d264c879dfeeb65e8d9e9f2d93ee6e70ca4a430bd82f2cac2e158a",
        "0ca2dc38e621aa730ab6a91a68178e2b3fed2cec12a716a91438fb5eeb7946d7",
        "0bc101091cad6ddb83f0c6d0384278e08c2bf0117e9bff0593f8d7e99d164c2f",
        "0b774b8bb5fcf6c97d4f4a6d69ff4ccb75199b52a19626c86067fafe1490efef",
    ),
    (
        "09899023bea9c9db00753e091e84e6b57cc1df1fc37029ec48bbd4343b5640b7",
        "069f4eb72865e011093731859d5b5a56892fd0adc78c22a211ce53192edde904",
        "07e1f8addc84f3cad91fc4d766ba60d3ec5f7c4f8141ace71fb2b1f0fa319ee0",
        "039ffa55a26b2fc51fe58214b41382378f4cb249e5a68957095edd4706adac1d",
        "086d6e32e88f8bbfc01ff775e9493bceef7db82b8af4e8c5f6ed56ba1b6e2e0e",
        "0f9509aee2d366838b13b844097335a89abbe25cc91492810fd72a775057982d",
    ),
    (
        "0dad1d14c0227baffb0db83d04969dc27f342b4e20e081964ca42f5170fd857a",
        "0ee13b0e15dcd88a5f6d5d77afecb719758d4bcf09904188d5597c0cba9a58a7",
        "0a8a018bc990e22d0d320ed02573b0680d91ce2dc82a3744601faa8146bf38c1",
        "0f88935a1204fd0ccc58f34b77457b9a2cb745b2ad3ceb9cabc26da20fb8ffac",
        "09ab77930cadee2922ce29f0951ce9c7b503194b1c974edcdd14ddff53129352",
        "072747a698ef6b148c63b5bbafaf64fd7de870a331342ed24c85b66c827f0322",
    ),
    (
        "036ee127e6b4eb71b6e610634067afd7bd09f3b9c41be056d9e0ae2ddf35ff5d",
        "00830bdd987b87d98a849b66504cab1e043d354c001b8ad0fb029decfcbbfb80",
        "0859d23cc276d486a125a4a5794db4ee79acbcb143f96fff57485f96328549cf",
        "0d69360f45cddf6b6802e3fb0b2951e10e2f643743809b43e6330995daaf6ea8",
        "068c466d3363325f72047eb48f771b21b4378a3871b431d02c89f0c86fce05f7",
        "05b7010a0ccb0922f0d7c242adb11715457272004d720ff952ae8eeb23f9ebb8",
    ),
    (
        "0464cf1d824b36f9f5d291c7f90c0d83c227a63c0b4ea21e642c3028f869dc65",
        "03323c62633c467917c3114d74f3f171efefd960f59bb5700a977d2c034486b6",
        "0ae59e552cda7cf837649043dc025d461c65708b0e8056bba8e2216bf5fc2978",
        "0b2f1ae65723206c353c69bb2f018a94d447be33e092732e64f1019833de2d6a",
        "005b8f366a676d17f256ac05aac6eab9464b57b58f91d266e09ca5d343896470",
        "0a41d58441ce0122fb2a9d4a57dc52c22b646fb14472eadd4dddbbe63298f5f0",
    ),
)
